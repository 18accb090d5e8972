"""Bank accounts with balance floors and per-transaction limits."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from carsim.util import format_with_commas, generate_uuid_v4, require_keys

REQUIRED_KEYS = ("uuid", "balance", "minBalance", "withdrawLimit", "depositLimit")


class TransactionError(Exception):
    """Raised when a withdrawal, deposit or transfer is not possible."""


@dataclass
class BankAccount:
    """An account holding a balance that may not drop below ``min_balance``."""

    withdraw_limit: float
    deposit_limit: float
    balance: float = 0.0
    min_balance: float = 0.0
    uuid: str = field(default_factory=generate_uuid_v4)

    def __post_init__(self) -> None:
        if self.balance < self.min_balance:
            raise ValueError("starting balance is lower than minimum balance")

    def can_withdraw(self, amount: float) -> bool:
        """Whether ``amount`` may be withdrawn."""
        return amount <= self.withdraw_limit and amount <= self.balance - self.min_balance

    def can_deposit(self, amount: float) -> bool:
        """Whether ``amount`` may be deposited."""
        return amount <= self.deposit_limit

    def withdraw(self, amount: float) -> None:
        """Take ``amount`` out of the account."""
        if not self.can_withdraw(amount):
            raise TransactionError(f"cannot withdraw {amount}")
        self.balance -= amount

    def deposit(self, amount: float) -> None:
        """Put ``amount`` into the account."""
        if not self.can_deposit(amount):
            raise TransactionError(f"cannot deposit {amount}")
        self.balance += amount

    def to_dict(self) -> dict[str, Any]:
        return {
            "uuid": self.uuid,
            "balance": self.balance,
            "minBalance": self.min_balance,
            "withdrawLimit": self.withdraw_limit,
            "depositLimit": self.deposit_limit,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BankAccount:
        require_keys(data, REQUIRED_KEYS)
        return cls(
            withdraw_limit=float(data["withdrawLimit"]),
            deposit_limit=float(data["depositLimit"]),
            balance=float(data["balance"]),
            min_balance=float(data["minBalance"]),
            uuid=str(data["uuid"]),
        )

    def save(self, data_dir: str | Path = "data") -> Path:
        """Write the account to ``<data_dir>/bank_accounts/<uuid>.json``."""
        folder = Path(data_dir) / "bank_accounts"
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / f"{self.uuid}.json"
        path.write_text(json.dumps(self.to_dict(), indent=4) + "\n", encoding="utf-8")
        return path

    def __str__(self) -> str:
        return (
            f"  Balance: ${format_with_commas(self.balance)}\n"
            f"  Minimum balance: ${format_with_commas(self.min_balance)}\n"
            f"  Withdraw limit: ${format_with_commas(self.withdraw_limit)}\n"
            f"  Deposit limit: ${format_with_commas(self.deposit_limit)}\n"
        )


def can_transfer(sender: BankAccount, receiver: BankAccount, amount: float) -> bool:
    """Whether ``amount`` can move from ``sender`` to ``receiver``."""
    return sender.can_withdraw(amount) and receiver.can_deposit(amount)


def transfer(sender: BankAccount, receiver: BankAccount, amount: float) -> None:
    """Move ``amount`` from ``sender`` to ``receiver``, or change nothing and raise."""
    if not can_transfer(sender, receiver, amount):
        raise TransactionError("Transaction impossible")
    sender.withdraw(amount)
    receiver.deposit(amount)