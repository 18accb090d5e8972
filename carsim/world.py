"""The simulation state: every person, dealership and vehicle, and their storage on disk."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from carsim.dealership import VehicleDealership
from carsim.motorcycle import Motorcycle
from carsim.person import Person
from carsim.pickup_truck import PickupTruck
from carsim.sedan import Sedan
from carsim.util import require_keys
from carsim.vehicle import Vehicle

DATA_SUBDIRS = ("people", "vehicles", "vehicle-dealership")

_VEHICLE_TYPES: dict[str, type[Sedan] | type[PickupTruck] | type[Motorcycle]] = {
    "sedan": Sedan,
    "pickup-truck": PickupTruck,
    "motorcycle": Motorcycle,
}


def create_data_dirs(data_dir: str | Path = "data") -> Path:
    """Create ``data_dir`` and its people, vehicles and dealership folders if missing."""
    root = Path(data_dir)
    for name in DATA_SUBDIRS:
        (root / name).mkdir(parents=True, exist_ok=True)
    return root


def vehicle_from_dict(data: Mapping[str, Any]) -> Vehicle:
    """Build the right kind of vehicle from serialized data, chosen by its ``type`` key."""
    require_keys(data, ("type",))
    vehicle_type = data["type"]
    try:
        vehicle_class = _VEHICLE_TYPES[vehicle_type]
    except (KeyError, TypeError):
        raise ValueError(f"unknown vehicle type: {vehicle_type!r}") from None
    return vehicle_class.from_dict(data)


def _files_in(folder: Path) -> list[Path]:
    return sorted(path for path in folder.iterdir() if path.is_file())


@dataclass
class World:
    """Everything the simulator knows about, tied to one data directory."""

    data_dir: Path = field(default_factory=lambda: Path("data"))
    people: list[Person] = field(default_factory=list)
    dealerships: list[VehicleDealership] = field(default_factory=list)
    vehicles: dict[str, Vehicle] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.data_dir = Path(self.data_dir)

    @classmethod
    def load(cls, data_dir: str | Path = "data") -> World:
        """Load vehicles first, then people and dealerships that refer to them."""
        import json

        root = create_data_dirs(data_dir)
        world = cls(data_dir=root)
        for path in _files_in(root / "vehicles"):
            vehicle = vehicle_from_dict(json.loads(path.read_text(encoding="utf-8")))
            world.register_vehicle(vehicle)
        for path in _files_in(root / "people"):
            world.people.append(Person.load_from_path(path, world.vehicles))
        for path in _files_in(root / "vehicle-dealership"):
            world.dealerships.append(VehicleDealership.load_from_path(path, world.vehicles))
        return world

    def save(self) -> list[Path]:
        """Write every person, dealership and vehicle; return the files written."""
        written: list[Path] = []
        written.extend(person.save(self.data_dir) for person in self.people)
        written.extend(dealership.save(self.data_dir) for dealership in self.dealerships)
        written.extend(vehicle.save(self.data_dir) for vehicle in self.vehicles.values())
        return written

    def register_vehicle(self, vehicle: Vehicle) -> None:
        """Make ``vehicle`` known by its UUID."""
        self.vehicles[vehicle.uuid] = vehicle

    def remove_person(self, index: int, current: Person | None = None) -> Person:
        """Remove and return the person at ``index``; the signed-in ``current`` cannot be removed."""
        if not 0 <= index < len(self.people):
            raise IndexError(f"no person at index {index}")
        if self.people[index] is current:
            raise ValueError("You cannot delete the user that you are signed in as.")
        return self.people.pop(index)

    def remove_dealership(self, index: int) -> VehicleDealership:
        """Remove and return the dealership at ``index``."""
        if not 0 <= index < len(self.dealerships):
            raise IndexError(f"no dealership at index {index}")
        return self.dealerships.pop(index)