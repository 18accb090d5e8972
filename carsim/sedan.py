"""Sedans: four-door cars with a trunk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from carsim.util import require_keys
from carsim.vehicle import Vehicle, sanitize_vehicle_data

SEDAN_KEYS = ("trunkCapacity", "engineCylinderCount")


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


class Sedan(Vehicle):
    """A four-wheeled, four-door, five-seat car."""

    def __init__(
        self,
        name: str,
        price: float,
        manufacturer: str,
        mileage: float,
        horsepower: float,
        max_speed: float,
        trunk_capacity: float,
        engine_cylinder_count: int,
        color: str,
        uuid: str | None = None,
    ) -> None:
        super().__init__(
            name=name,
            price=price,
            wheels=4,
            doors=4,
            seats=5,
            max_passengers=4,
            manufacturer=manufacturer,
            mileage=mileage,
            horsepower=horsepower,
            max_speed=max_speed,
            color=color,
            vehicle_type="sedan",
            uuid=uuid,
        )
        self.trunk_capacity = trunk_capacity
        self.engine_cylinder_count = engine_cylinder_count

    def approximate_fuel_usage(self, kilometres: float) -> float:
        """Litres used, from a base of 13.6 km/L adjusted for engine and trunk."""
        efficiency = 13.6
        efficiency -= _clamp((self.engine_cylinder_count - 4) * 0.6, -2.0, 3.2)
        efficiency -= _clamp(self.trunk_capacity * 0.01, 0.0, 2.0)
        return kilometres / efficiency

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["trunkCapacity"] = self.trunk_capacity
        data["engineCylinderCount"] = self.engine_cylinder_count
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Sedan:
        base = sanitize_vehicle_data(data)
        require_keys(data, SEDAN_KEYS)
        return cls(
            name=str(base["name"]),
            price=float(base["price"]),
            manufacturer=str(base["manufacturer"]),
            mileage=float(base["mileage"]),
            horsepower=float(base["horsepower"]),
            max_speed=float(base["maxSpeed"]),
            trunk_capacity=float(data["trunkCapacity"]),
            engine_cylinder_count=int(data["engineCylinderCount"]),
            color=str(base["color"]),
            uuid=str(base["uuid"]),
        )

    @classmethod
    def load_from_path(cls, path: str | Path) -> Sedan:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"{path} does not exist")
        return cls.from_dict(json.loads(path.read_text(encoding="utf-8")))

    @classmethod
    def load_from_uuid(cls, uuid: str, data_dir: str | Path = "data") -> Sedan:
        return cls.load_from_path(Path(data_dir) / "vehicles" / f"{uuid}.json")

    def formatted(self) -> str:
        return (
            super().formatted()
            + f"  Trunk capacity: {self.trunk_capacity:.6f} kg\n"
            + f"  Engine cylinder count: {self.engine_cylinder_count}\n"
        )