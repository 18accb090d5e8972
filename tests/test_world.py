import json

import pytest

from carsim.bank_account import BankAccount
from carsim.dealership import VehicleDealership
from carsim.motorcycle import Motorcycle, MotorcycleType
from carsim.person import Person
from carsim.pickup_truck import PickupTruck
from carsim.sedan import Sedan
from carsim.util import MissingKeyError
from carsim.world import World, create_data_dirs, vehicle_from_dict


def _account(balance=1000.0):
    return BankAccount(withdraw_limit=5000.0, deposit_limit=5000.0, balance=balance)


def _sedan():
    return Sedan("Accord", 300.0, "Honda", 10.0, 200.0, 180.0, 100.0, 4, "Blue")


def _truck():
    return PickupTruck("F-150", 400.0, "Ford", 5.0, 300.0, 170.0, 500.0, 2000.0, 8, "Red")


def _bike():
    return Motorcycle("Ninja", 200.0, "Kawasaki", 1.0, 100.0, 250.0, "Green", 400.0, 5.0,
                      MotorcycleType.SPORT)


def _populated(tmp_path):
    world = World(data_dir=tmp_path)
    sedan, truck, bike = _sedan(), _truck(), _bike()
    for vehicle in (sedan, truck, bike):
        world.register_vehicle(vehicle)
    person = Person("Ada", "", "Lovelace", 0, 170.0, _account())
    person.vehicles.append(sedan)
    dealer = VehicleDealership("Cars R Us", _account(5000.0))
    dealer.give_vehicle(truck)
    dealer.give_vehicle(bike)
    world.people.append(person)
    world.dealerships.append(dealer)
    return world, person, dealer, sedan, truck, bike


def test_create_data_dirs(tmp_path):
    root = create_data_dirs(tmp_path / "data")
    assert sorted(p.name for p in root.iterdir()) == ["people", "vehicle-dealership", "vehicles"]


def test_vehicle_from_dict_picks_class():
    for vehicle in (_sedan(), _truck(), _bike()):
        rebuilt = vehicle_from_dict(vehicle.to_dict())
        assert type(rebuilt) is type(vehicle)
        assert rebuilt.to_dict() == vehicle.to_dict()


def test_vehicle_from_dict_missing_type():
    data = _sedan().to_dict()
    del data["type"]
    with pytest.raises(MissingKeyError):
        vehicle_from_dict(data)


def test_vehicle_from_dict_unknown_type():
    data = _sedan().to_dict()
    data["type"] = "hovercraft"
    with pytest.raises(ValueError):
        vehicle_from_dict(data)


def test_load_empty(tmp_path):
    world = World.load(tmp_path)
    assert world.people == []
    assert world.dealerships == []
    assert world.vehicles == {}
    assert (tmp_path / "vehicles").is_dir()


def test_save_and_load_round_trip(tmp_path):
    world, person, dealer, sedan, truck, bike = _populated(tmp_path)
    written = world.save()
    assert len(written) == 5
    assert all(path.exists() for path in written)

    loaded = World.load(tmp_path)
    assert set(loaded.vehicles) == {sedan.uuid, truck.uuid, bike.uuid}
    assert len(loaded.people) == 1
    loaded_person = loaded.people[0]
    assert loaded_person.to_dict() == person.to_dict()
    assert loaded_person.vehicles[0] is loaded.vehicles[sedan.uuid]
    loaded_dealer = loaded.dealerships[0]
    assert loaded_dealer.to_dict() == dealer.to_dict()
    assert [v.uuid for v in loaded_dealer.vehicles] == [truck.uuid, bike.uuid]


def test_saved_vehicle_file_has_type(tmp_path):
    world, _, _, sedan, _, _ = _populated(tmp_path)
    world.save()
    data = json.loads((tmp_path / "vehicles" / f"{sedan.uuid}.json").read_text())
    assert data["type"] == "sedan"


def test_load_skips_unknown_vehicle_with_warning(tmp_path):
    world, person, _, sedan, _, _ = _populated(tmp_path)
    world.save()
    (tmp_path / "vehicles" / f"{sedan.uuid}.json").unlink()
    with pytest.warns(UserWarning):
        loaded = World.load(tmp_path)
    assert loaded.people[0].vehicles == []


def test_remove_person(tmp_path):
    world, person, *_ = _populated(tmp_path)
    other = Person("Bob", "", "Smith", 0, 180.0, _account())
    world.people.append(other)
    assert world.remove_person(1, current=person) is other
    assert world.people == [person]


def test_remove_current_person_refused(tmp_path):
    world, person, *_ = _populated(tmp_path)
    with pytest.raises(ValueError):
        world.remove_person(0, current=person)
    assert world.people == [person]


def test_remove_person_out_of_range(tmp_path):
    world, *_ = _populated(tmp_path)
    with pytest.raises(IndexError):
        world.remove_person(5)


def test_remove_dealership(tmp_path):
    world, _, dealer, *_ = _populated(tmp_path)
    assert world.remove_dealership(0) is dealer
    assert world.dealerships == []
    with pytest.raises(IndexError):
        world.remove_dealership(0)


def test_register_vehicle_replaces_same_uuid(tmp_path):
    world = World(data_dir=tmp_path)
    first = _sedan()
    second = Sedan("Civic", 100.0, "Honda", 0.0, 150.0, 160.0, 50.0, 4, "White", uuid=first.uuid)
    world.register_vehicle(first)
    world.register_vehicle(second)
    assert world.vehicles == {first.uuid: second}