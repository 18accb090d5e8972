import json

import pytest

from carsim.pickup_truck import PickupTruck
from carsim.util import MissingKeyError


def make_truck(**overrides):
    args = dict(
        name="Hauler 2500",
        price=45000.0,
        manufacturer="Acme",
        mileage=120.0,
        horsepower=300.0,
        max_speed=180.0,
        bed_capacity=0.0,
        towing_max_load=0.0,
        engine_cylinder_count=4,
        color="Red",
    )
    args.update(overrides)
    return PickupTruck(**args)


def test_fixed_layout_and_type():
    truck = make_truck()
    assert (truck.wheels, truck.doors, truck.seats, truck.max_passengers) == (4, 2, 2, 1)
    assert truck.to_dict()["type"] == "pickup-truck"


def test_base_efficiency_with_no_adjustments():
    truck = make_truck()
    assert truck.approximate_fuel_usage(8.76) == pytest.approx(1.0)


def test_fuel_usage_scales_linearly():
    truck = make_truck(bed_capacity=50.0, towing_max_load=100.0, engine_cylinder_count=6)
    assert truck.approximate_fuel_usage(0) == 0
    assert truck.approximate_fuel_usage(200) == pytest.approx(2 * truck.approximate_fuel_usage(100))


def test_bed_and_towing_adjustments_are_clamped():
    at_cap = make_truck(bed_capacity=200.0, towing_max_load=400.0)
    beyond = make_truck(bed_capacity=5000.0, towing_max_load=90000.0)
    assert at_cap.approximate_fuel_usage(100) == pytest.approx(beyond.approximate_fuel_usage(100))


def test_more_cylinders_use_more_fuel():
    small = make_truck(engine_cylinder_count=4)
    big = make_truck(engine_cylinder_count=8)
    assert big.approximate_fuel_usage(100) > small.approximate_fuel_usage(100)


def test_cylinder_adjustment_is_clamped():
    assert make_truck(engine_cylinder_count=12).approximate_fuel_usage(100) == pytest.approx(
        make_truck(engine_cylinder_count=20).approximate_fuel_usage(100)
    )
    assert make_truck(engine_cylinder_count=0).approximate_fuel_usage(100) == pytest.approx(
        make_truck(engine_cylinder_count=-10).approximate_fuel_usage(100)
    )


def test_dict_round_trip():
    truck = make_truck(bed_capacity=750.0, towing_max_load=3500.0, engine_cylinder_count=8)
    data = truck.to_dict()
    assert data["bedCapacity"] == 750.0
    assert data["towingMaxLoad"] == 3500.0
    assert data["engineCylinderCount"] == 8
    restored = PickupTruck.from_dict(data)
    assert restored.to_dict() == data
    assert restored.uuid == truck.uuid


def test_from_dict_missing_specific_key():
    data = make_truck().to_dict()
    del data["towingMaxLoad"]
    with pytest.raises(MissingKeyError) as info:
        PickupTruck.from_dict(data)
    assert info.value.key == "towingMaxLoad"


def test_from_dict_missing_common_key():
    data = make_truck().to_dict()
    del data["name"]
    with pytest.raises(MissingKeyError):
        PickupTruck.from_dict(data)


def test_save_and_load_from_uuid(tmp_path):
    truck = make_truck(bed_capacity=10.0)
    path = truck.save(tmp_path)
    assert path == tmp_path / "vehicles" / f"{truck.uuid}.json"
    assert json.loads(path.read_text())["type"] == "pickup-truck"
    loaded = PickupTruck.load_from_uuid(truck.uuid, tmp_path)
    assert loaded.to_dict() == truck.to_dict()


def test_load_from_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        PickupTruck.load_from_path(tmp_path / "nothing.json")


def test_formatted_contains_truck_details():
    text = make_truck(bed_capacity=750.0, towing_max_load=3500.0, engine_cylinder_count=8).formatted()
    assert text.startswith("Vehicle Name: Hauler 2500\n")
    assert "  Bed capacity: 750.000000 kg\n" in text
    assert "  Towing max load: 3500.000000 kg\n" in text
    assert text.endswith("  Engine cylinder count: 8\n")
    assert str(make_truck()) == make_truck().formatted().replace(make_truck().uuid, make_truck().uuid)