import json

import pytest

from carsim.util import MissingKeyError
from carsim.vehicle import REQUIRED_KEYS, Vehicle, sanitize_vehicle_data


class _Cart(Vehicle):
    def approximate_fuel_usage(self, kilometres):
        return kilometres / 10.0


def make_cart(**overrides):
    params = dict(
        name="Cart",
        price=1500.0,
        wheels=4,
        doors=0,
        seats=2,
        max_passengers=1,
        manufacturer="Acme",
        mileage=100.0,
        horsepower=20.0,
        max_speed=40.0,
        color="Red",
        vehicle_type="cart",
    )
    params.update(overrides)
    return _Cart(**params)


def test_vehicle_is_abstract():
    with pytest.raises(TypeError):
        Vehicle("x", 1.0, 4, 4, 4, 4, "m", 0.0, 1.0, 1.0, "c", "t")


def test_start_and_stop_toggle():
    cart = make_cart()
    assert Vehicle.start(cart) is True
    assert Vehicle.start(cart) is False
    assert Vehicle.stop(cart) is True
    assert Vehicle.stop(cart) is False
    assert cart.started is False


def test_drive_requires_started_and_positive_distance():
    cart = make_cart()
    assert Vehicle.drive(cart, 10) is False
    assert cart.mileage == 100.0
    Vehicle.start(cart)
    assert Vehicle.drive(cart, 0) is False
    assert Vehicle.drive(cart, -5) is False
    assert Vehicle.drive(cart, 25) is True
    assert cart.mileage == 125.0


def test_driver_management():
    cart = make_cart()
    assert Vehicle.remove_driver(cart) is False
    assert Vehicle.add_driver(cart, None) is False
    driver = object()
    assert Vehicle.add_driver(cart, driver) is True
    assert cart.driver is driver
    assert Vehicle.add_driver(cart, object()) is False
    assert Vehicle.remove_driver(cart) is True
    assert cart.driver is None


def test_change_color():
    cart = make_cart()
    assert Vehicle.change_color(cart, "") is False
    assert Vehicle.change_color(cart, "Red") is False
    assert Vehicle.change_color(cart, "Blue") is True
    assert cart.color == "Blue"


def test_change_price():
    cart = make_cart()
    assert Vehicle.change_price(cart, 0) is False
    assert Vehicle.change_price(cart, -1) is False
    assert cart.price == 1500.0
    assert Vehicle.change_price(cart, 2000.0) is True
    assert cart.price == 2000.0


def test_uuid_generated_or_given():
    first = Vehicle.to_dict(make_cart())["uuid"]
    second = Vehicle.to_dict(make_cart())["uuid"]
    assert len({first, second}) == 2
    assert Vehicle.to_dict(make_cart(uuid="abc"))["uuid"] == "abc"


def test_to_dict_always_stopped_and_has_required_keys():
    cart = make_cart()
    Vehicle.start(cart)
    data = Vehicle.to_dict(cart)
    assert data["started"] is False
    assert set(data) == set(REQUIRED_KEYS)
    assert data["type"] == "cart"
    assert data["maxPassengers"] == 1


def test_save_writes_json(tmp_path):
    cart = make_cart()
    path = Vehicle.save(cart, tmp_path)
    assert path == tmp_path / "vehicles" / f"{cart.uuid}.json"
    assert json.loads(path.read_text()) == Vehicle.to_dict(cart)


def test_sanitize_drops_extra_keys():
    data = make_cart().to_dict()
    data["extra"] = 1
    clean = sanitize_vehicle_data(data)
    assert "extra" not in clean
    assert clean == make_cart(uuid=data["uuid"]).to_dict()


def test_sanitize_missing_key_raises():
    data = make_cart().to_dict()
    del data["color"]
    with pytest.raises(MissingKeyError) as info:
        sanitize_vehicle_data(data)
    assert info.value.key == "color"


def test_formatted_contents():
    cart = make_cart()
    text = Vehicle.formatted(cart)
    assert text.startswith("Vehicle Name: Cart\n")
    assert "  Started?: No\n" in text
    assert "  Manufacturer: Acme\n" in text
    assert "  Color: Red\n" in text
    assert str(cart) == text
    Vehicle.start(cart)
    assert "  Started?: Yes\n" in Vehicle.formatted(cart)