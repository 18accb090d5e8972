"""People who own a bank account and a list of vehicles."""

from __future__ import annotations

import json
import time
import warnings
from pathlib import Path
from typing import Any, Mapping

from carsim.bank_account import BankAccount
from carsim.util import format_with_commas, generate_uuid_v4, require_keys
from carsim.vehicle import Vehicle

REQUIRED_KEYS = (
    "uuid",
    "firstName",
    "middleName",
    "lastName",
    "birthTimestamp",
    "height",
    "bankAccount",
    "vehicles",
)

SECONDS_PER_YEAR = 60 * 60 * 24 * 365


class Person:
    """A person with a name, birth date, height, bank account and vehicles."""

    def __init__(
        self,
        first_name: str,
        middle_name: str,
        last_name: str,
        birth_timestamp: int,
        height: float,
        bank_account: BankAccount,
        uuid: str | None = None,
    ) -> None:
        self._first_name = first_name
        self.middle_name = middle_name
        self._last_name = last_name
        self.birth_timestamp = birth_timestamp
        self.height = height
        self.bank_account = bank_account
        self.vehicles: list[Vehicle] = []
        self.uuid = uuid if uuid is not None else generate_uuid_v4()

    @property
    def first_name(self) -> str:
        return self._first_name

    @first_name.setter
    def first_name(self, value: str) -> None:
        if not value:
            raise ValueError("first name must not be empty")
        self._first_name = value

    @property
    def last_name(self) -> str:
        return self._last_name

    @last_name.setter
    def last_name(self, value: str) -> None:
        if not value:
            raise ValueError("last name must not be empty")
        self._last_name = value

    def change_height(self, delta: float) -> bool:
        """Adjust the height by ``delta`` cm unless it would become non-positive."""
        if self.height + delta <= 0:
            return False
        self.height += delta
        return True

    def age(self, now: int | None = None) -> float:
        """Age in years at unix time ``now`` (defaults to the current time)."""
        current = int(time.time()) if now is None else now
        return (current - self.birth_timestamp) / SECONDS_PER_YEAR

    def full_name(self) -> str:
        """First, middle (if any) and last name joined by spaces."""
        parts = [self.first_name]
        if self.middle_name:
            parts.append(self.middle_name)
        parts.append(self.last_name)
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "uuid": self.uuid,
            "firstName": self.first_name,
            "middleName": self.middle_name,
            "lastName": self.last_name,
            "birthTimestamp": self.birth_timestamp,
            "height": self.height,
            "bankAccount": self.bank_account.to_dict(),
            "vehicles": [vehicle.uuid for vehicle in self.vehicles],
        }

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], vehicles_by_uuid: Mapping[str, Vehicle]
    ) -> Person:
        """Build a person; vehicles unknown to ``vehicles_by_uuid`` are skipped with a warning."""
        require_keys(data, REQUIRED_KEYS)
        person = cls(
            first_name=str(data["firstName"]),
            middle_name=str(data["middleName"]),
            last_name=str(data["lastName"]),
            birth_timestamp=int(data["birthTimestamp"]),
            height=float(data["height"]),
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
            person.vehicles.append(vehicle)
        return person

    def save(self, data_dir: str | Path = "data") -> Path:
        """Write the person to ``<data_dir>/people/<uuid>.json``."""
        folder = Path(data_dir) / "people"
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / f"{self.uuid}.json"
        path.write_text(json.dumps(self.to_dict(), indent=4) + "\n", encoding="utf-8")
        return path

    @classmethod
    def load_from_path(
        cls, path: str | Path, vehicles_by_uuid: Mapping[str, Vehicle]
    ) -> Person:
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
    ) -> Person:
        return cls.load_from_path(Path(data_dir) / "people" / f"{uuid}.json", vehicles_by_uuid)

    def __str__(self) -> str:
        return (
            f"{self.full_name()} | Age: {format_with_commas(float(self.age()))} years"
            f" | Height: {self.height:g}cm"
            f" | Balance: ${format_with_commas(float(self.bank_account.balance))}"
            f" | UUID: {self.uuid}"
        )