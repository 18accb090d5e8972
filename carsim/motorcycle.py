"""Motorcycles: two-wheeled single-seat vehicles of several styles."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

from carsim.util import require_keys
from carsim.vehicle import Vehicle, sanitize_vehicle_data

MOTORCYCLE_KEYS = ("engineSize", "maxAcceleration", "motorcycleType")


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


class MotorcycleType(Enum):
    """The style of a motorcycle."""

    SPORT = "sport"
    CRUISER = "cruiser"
    SCOOTER = "scooter"
    TOURING = "touring"

    @classmethod
    def parse(cls, text: str) -> MotorcycleType:
        """Case-insensitively convert a name such as ``"Sport"``; raise ValueError if unknown."""
        try:
            return cls(text.lower())
        except ValueError:
            raise ValueError(f"unknown motorcycle type: {text!r}") from None


_BASE_EFFICIENCY = {
    MotorcycleType.SPORT: 38.3,
    MotorcycleType.CRUISER: 25.5,
    MotorcycleType.SCOOTER: 29.76,
    MotorcycleType.TOURING: 22.9,
}


class Motorcycle(Vehicle):
    """A two-wheeled, door-less, single-seat vehicle."""

    def __init__(
        self,
        name: str,
        price: float,
        manufacturer: str,
        mileage: float,
        horsepower: float,
        max_speed: float,
        color: str,
        engine_size: float,
        max_acceleration: float,
        motorcycle_type: MotorcycleType,
        uuid: str | None = None,
    ) -> None:
        super().__init__(
            name=name,
            price=price,
            wheels=2,
            doors=0,
            seats=1,
            max_passengers=1,
            manufacturer=manufacturer,
            mileage=mileage,
            horsepower=horsepower,
            max_speed=max_speed,
            color=color,
            vehicle_type="motorcycle",
            uuid=uuid,
        )
        self.engine_size = engine_size
        self.max_acceleration = max_acceleration
        self.motorcycle_type = motorcycle_type

    def approximate_fuel_usage(self, kilometres: float) -> float:
        """Litres used, from a per-type base efficiency adjusted for engine and acceleration."""
        efficiency = _BASE_EFFICIENCY[self.motorcycle_type]
        efficiency -= _clamp((self.engine_size - 100) * 0.012, 0.0, 9.0)
        efficiency -= _clamp(self.max_acceleration * 0.5, 0.0, 3.5)
        return kilometres / efficiency

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["engineSize"] = self.engine_size
        data["maxAcceleration"] = self.max_acceleration
        data["motorcycleType"] = self.motorcycle_type.value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Motorcycle:
        base = sanitize_vehicle_data(data)
        require_keys(data, MOTORCYCLE_KEYS)
        return cls(
            name=str(base["name"]),
            price=float(base["price"]),
            manufacturer=str(base["manufacturer"]),
            mileage=float(base["mileage"]),
            horsepower=float(base["horsepower"]),
            max_speed=float(base["maxSpeed"]),
            color=str(base["color"]),
            engine_size=float(data["engineSize"]),
            max_acceleration=float(data["maxAcceleration"]),
            motorcycle_type=MotorcycleType.parse(str(data["motorcycleType"])),
            uuid=str(base["uuid"]),
        )

    @classmethod
    def load_from_path(cls, path: str | Path) -> Motorcycle:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"{path} does not exist")
        return cls.from_dict(json.loads(path.read_text(encoding="utf-8")))

    @classmethod
    def load_from_uuid(cls, uuid: str, data_dir: str | Path = "data") -> Motorcycle:
        return cls.load_from_path(Path(data_dir) / "vehicles" / f"{uuid}.json")

    def formatted(self) -> str:
        return (
            super().formatted()
            + f"  Engine size: {self.engine_size:.6f} CC\n"
            + f"  Max acceleration: {self.max_acceleration:.6f} m/s^2\n"
            + f"  Motorcycle type: {self.motorcycle_type.value} m/s^2\n"
        )