"""Vehicle dealerships that own, buy and sell vehicles."""

from __future__ import annotations

import json
import warnings
from pathlib import Path
from typing import Any, Mapping

from carsim.bank_account import BankAccount, transfer
from carsim.util import format_with_commas, generate_uuid_v4, require_keys
from carsim.vehicle import Vehicle

REQUIRED_KEYS = ("uuid", "name", "bankAccount", "vehicles")


class VehicleDealership:
    """A company with a bank account and a stock of vehicles."""

    def __init__(self, name: str, bank_account: BankAccount, uuid: str | None = None) -> None:
        self.name = name
        self.bank_account = bank_account
        self.vehicles: list[Vehicle] = []
        self.uuid = uuid if uuid is not None else generate_uuid_v4()

    def _owns(self, vehicle: Vehicle) -> bool:
        return any(owned is vehicle for owned in self.vehicles)

    def buy_vehicle(self, index: int, buyer_account: BankAccount) -> Vehicle:
        """Sell the vehicle at ``index`` to the buyer; raises IndexError or TransactionError."""
        if not 0 <= index < len(self.vehicles):
            raise IndexError(f"no vehicle at index {index}")
        vehicle = self.vehicles[index]
        transfer(buyer_account, self.bank_account, vehicle.price)
        del self.vehicles[index]
        return vehicle

    def sell_vehicle(self, vehicle: Vehicle, seller_account: BankAccount) -> int:
        """Buy ``vehicle`` from the seller at its price; return its new index."""
        if vehicle is None:
            raise ValueError("no vehicle to buy")
        if self._owns(vehicle):
            raise ValueError("the dealership already owns this vehicle")
        transfer(self.bank_account, seller_account, vehicle.price)
        self.vehicles.append(vehicle)
        return len(self.vehicles) - 1

    def give_vehicle(self, vehicle: Vehicle) -> int:
        """Add ``vehicle`` without payment; return its new index."""
        if self._owns(vehicle):
            raise ValueError("the dealership already owns this vehicle")
        self.vehicles.append(vehicle)
        return len(self.vehicles) - 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "uuid": self.uuid,
            "name": self.name,
            "bankAccount": self.bank_account.to_dict(),
            "vehicles": [vehicle.uuid for vehicle in self.vehicles],
        }

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], vehicles_by_uuid: Mapping[str, Vehicle]
    ) -> VehicleDealership:
        """Build a dealership; vehicles unknown to ``vehicles_by_uuid`` are skipped with a warning."""
        require_keys(data, REQUIRED_KEYS)
        dealership = cls(
            name=str(data["name"]),
            bank_account=BankAccount.from_dict(data["bankAccount"]),
            uuid=str(data["uuid"]),
        )
        for vehicle_uuid in data["vehicles"]:
            vehicle = vehicles_by_uuid.get(vehicle_uuid)
            if vehicle is None:
                warnings.warn(
                    f"Vehicle of UUID {vehicle_uuid} does not exist! Skipping.",
                    stacklevel=2,
                )
                continue
            dealership.vehicles.append(vehicle)
        return dealership

    def save(self, data_dir: str | Path = "data") -> Path:
        """Write the dealership to ``<data_dir>/vehicle-dealership/<uuid>.json``."""
        folder = Path(data_dir) / "vehicle-dealership"
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / f"{self.uuid}.json"
        path.write_text(json.dumps(self.to_dict(), indent=4) + "\n", encoding="utf-8")
        return path

    @classmethod
    def load_from_path(
        cls, path: str | Path, vehicles_by_uuid: Mapping[str, Vehicle]
    ) -> VehicleDealership:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"{path} does not exist")
        return cls.from_dict(json.loads(path.read_text(encoding="utf-8")), vehicles_by_uuid)

    @classmethod
    def load_from_uuid(
        cls,
        uuid: str,
        vehicles_by_uuid: Mapping[str, Vehicle],
        data_dir: str | Path = "data",
    ) -> VehicleDealership:
        return cls.load_from_path(
            Path(data_dir) / "vehicle-dealership" / f"{uuid}.json", vehicles_by_uuid
        )

    def __str__(self) -> str:
        return (
            f"Dealership Name: {self.name}\n"
            f"  UUID: {self.uuid}\n"
            f"  # of vehicles: {format_with_commas(len(self.vehicles))}\n"
            f"Bank Account Info:\n{self.bank_account}\n"
        )