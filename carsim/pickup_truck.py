"""Pickup trucks: two-door vehicles with a cargo bed and towing capacity."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from carsim.util import require_keys
from carsim.vehicle import Vehicle, sanitize_vehicle_data

PICKUP_KEYS = ("bedCapacity", "towingMaxLoad", "engineCylinderCount")


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


class PickupTruck(Vehicle):
    """A four-wheeled, two-door, two-seat truck."""

    def __init__(
        self,
        name: str,
        price: float,
        manufacturer: str,
        mileage: float,
        horsepower: float,
        max_speed: float,
        bed_capacity: float,
        towing_max_load: float,
        engine_cylinder_count: int,
        color: str,
        uuid: str | None = None,
    ) -> None:
        super().__init__(
            name=name,
            price=price,
            wheels=4,
            doors=2,
            seats=2,
            max_passengers=1,
            manufacturer=manufacturer,
            mileage=mileage,
            horsepower=horsepower,
            max_speed=max_speed,
            color=color,
            vehicle_type="pickup-truck",
            uuid=uuid,
        )
        self.bed_capacity = bed_capacity
        self.towing_max_load = towing_max_load
        self.engine_cylinder_count = engine_cylinder_count

    def approximate_fuel_usage(self, kilometres: float) -> float:
        """Litres used, from a base of 8.76 km/L adjusted for engine, bed and towing."""
        efficiency = 8.76
        efficiency -= _clamp((self.engine_cylinder_count - 4) * 0.6, -2.0, 3.2)
        efficiency -= _clamp(self.bed_capacity * 0.01, 0.0, 2.0)
        efficiency -= _clamp((self.towing_max_load / 2) * 0.01, 0.0, 2.0)
        return kilometres / efficiency

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["bedCapacity"] = self.bed_capacity
        data["towingMaxLoad"] = self.towing_max_load
        data["engineCylinderCount"] = self.engine_cylinder_count
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PickupTruck:
        base = sanitize_vehicle_data(data)
        require_keys(data, PICKUP_KEYS)
        return cls(
            name=str(base["name"]),
            price=float(base["price"]),
            manufacturer=str(base["manufacturer"]),
            mileage=float(base["mileage"]),
            horsepower=float(base["horsepower"]),
            max_speed=float(base["maxSpeed"]),
            bed_capacity=float(data["bedCapacity"]),
            towing_max_load=float(data["towingMaxLoad"]),
            engine_cylinder_count=int(data["engineCylinderCount"]),
            color=str(base["color"]),
            uuid=str(base["uuid"]),
        )

    @classmethod
    def load_from_path(cls, path: str | Path) -> PickupTruck:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"{path} does not exist")
        return cls.from_dict(json.loads(path.read_text(encoding="utf-8")))

    @classmethod
    def load_from_uuid(cls, uuid: str, data_dir: str | Path = "data") -> PickupTruck:
        return cls.load_from_path(Path(data_dir) / "vehicles" / f"{uuid}.json")

    def formatted(self) -> str:
        return (
            super().formatted()
            + f"  Bed capacity: {self.bed_capacity:.6f} kg\n"
            + f"  Towing max load: {self.towing_max_load:.6f} kg\n"
            + f"  Engine cylinder count: {self.engine_cylinder_count}\n"
        )