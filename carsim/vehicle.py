"""Base class shared by every kind of vehicle."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Mapping

from carsim.util import format_with_commas, generate_uuid_v4, require_keys

REQUIRED_KEYS = (
    "uuid",
    "name",
    "price",
    "wheels",
    "doors",
    "seats",
    "maxPassengers",
    "maxSpeed",
    "manufacturer",
    "mileage",
    "horsepower",
    "started",
    "color",
    "type",
)


def sanitize_vehicle_data(data: Mapping[str, Any]) -> dict[str, Any]:
    """Return only the common vehicle keys of ``data``; raise if one is missing."""
    require_keys(data, REQUIRED_KEYS)
    return {key: data[key] for key in REQUIRED_KEYS}


class Vehicle(ABC):
    """A vehicle that can be started, driven, priced and saved."""

    def __init__(
        self,
        name: str,
        price: float,
        wheels: int,
        doors: int,
        seats: int,
        max_passengers: int,
        manufacturer: str,
        mileage: float,
        horsepower: float,
        max_speed: float,
        color: str,
        vehicle_type: str,
        uuid: str | None = None,
    ) -> None:
        self.name = name
        self.price = price
        self.wheels = wheels
        self.doors = doors
        self.seats = seats
        self.max_passengers = max_passengers
        self.manufacturer = manufacturer
        self.mileage = mileage
        self.horsepower = horsepower
        self.max_speed = max_speed
        self.color = color
        self.vehicle_type = vehicle_type
        self.driver: Any = None
        self.started = False
        self.uuid = uuid if uuid is not None else generate_uuid_v4()

    def start(self) -> bool:
        """Start the engine; False if it was already running."""
        if self.started:
            return False
        self.started = True
        return True

    def stop(self) -> bool:
        """Stop the engine; False if it was not running."""
        if not self.started:
            return False
        self.started = False
        return True

    def drive(self, distance: float) -> bool:
        """Add ``distance`` km to the mileage if started and the distance is positive."""
        if not self.started or distance <= 0:
            return False
        self.mileage += distance
        return True

    def add_driver(self, driver: Any) -> bool:
        """Seat ``driver`` unless someone already drives or ``driver`` is None."""
        if self.driver is not None or driver is None:
            return False
        self.driver = driver
        return True

    def remove_driver(self) -> bool:
        """Remove the current driver; False if there is none."""
        if self.driver is None:
            return False
        self.driver = None
        return True

    def change_color(self, new_color: str) -> bool:
        """Repaint unless the new colour is empty or unchanged."""
        if not new_color or new_color == self.color:
            return False
        self.color = new_color
        return True

    def change_price(self, new_price: float) -> bool:
        """Set a new positive price."""
        if new_price <= 0:
            return False
        self.price = new_price
        return True

    @abstractmethod
    def approximate_fuel_usage(self, kilometres: float) -> float:
        """Rough litres of fuel needed to travel ``kilometres``."""

    def to_dict(self) -> dict[str, Any]:
        # The driver is never stored, and a saved vehicle is always stopped.
        return {
            "uuid": self.uuid,
            "name": self.name,
            "price": self.price,
            "wheels": self.wheels,
            "doors": self.doors,
            "seats": self.seats,
            "maxPassengers": self.max_passengers,
            "maxSpeed": self.max_speed,
            "manufacturer": self.manufacturer,
            "mileage": self.mileage,
            "horsepower": self.horsepower,
            "started": False,
            "color": self.color,
            "type": self.vehicle_type,
        }

    def save(self, data_dir: str | Path = "data") -> Path:
        """Write the vehicle to ``<data_dir>/vehicles/<uuid>.json``."""
        folder = Path(data_dir) / "vehicles"
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / f"{self.uuid}.json"
        path.write_text(json.dumps(self.to_dict(), indent=4) + "\n", encoding="utf-8")
        return path

    def formatted(self) -> str:
        """A multi-line description of the vehicle."""
        return (
            f"Vehicle Name: {self.name}\n"
            f"  Price: ${format_with_commas(float(self.price))}\n"
            f"  Started?: {'Yes' if self.started else 'No'}\n"
            f"  Wheels: {self.wheels}\n"
            f"  Doors: {self.doors}\n"
            f"  Seats: {self.seats}\n"
            f"  Max passengers: {self.max_passengers}\n"
            f"  Manufacturer: {self.manufacturer}\n"
            f"  Mileage: {self.mileage:.6f} km\n"
            f"  Horsepower: {self.horsepower:.6f} hp\n"
            f"  Max speed: {self.max_speed:.6f} km/h\n"
            f"  Color: {self.color}\n"
            f"  Fuel efficiency: {1 / self.approximate_fuel_usage(1):.6f}km/L \n"
        )

    def __str__(self) -> str:
        return self.formatted()