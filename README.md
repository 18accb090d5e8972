# carsim

A small interactive car simulator for the terminal. You pick or create a
person (with a bank account), create vehicle dealerships, manufacture
sedans, pickup trucks and motorcycles for them, and buy and sell vehicles
between people and dealerships. Everything can be saved as JSON files and
loaded again the next time you start the program.

## Installing

```
pip install .
```

## Running

```
carsim
carsim --data-dir path/to/folder
```

On start the program creates the data folder (`data/` in the current
directory unless `--data-dir` says otherwise), with `people/`,
`vehicles/` and `vehicle-dealership/` inside, and loads any previously
saved vehicles, people and dealerships from it. You then choose an
existing person or create a new one, and a menu offers:

- User actions: switch account (1), view your info (2), view your bank
  account (3), view your vehicles (4), sell a vehicle to a dealership (5).
- Dealership actions: list dealerships (10), view one dealership (11),
  view its vehicles (12), buy one of its vehicles (13), manufacture a
  vehicle for it (14).
- System actions: delete a person (-2), create a dealership (-5), delete
  a dealership (-7), save everything (-10), quit (-100).

Transactions respect each account's minimum balance and its withdraw and
deposit limits; a purchase or sale that breaks any of them is refused.
Nothing is written to disk until you choose to save.

## Using it as a library

The building blocks can be used directly:

```python
from carsim.bank_account import BankAccount, transfer
from carsim.sedan import Sedan
from carsim.dealership import VehicleDealership

dealer = VehicleDealership(
    "Main Street Motors",
    BankAccount(withdraw_limit=50_000, deposit_limit=50_000, balance=100_000),
)
car = Sedan("Example Sedan 2023", 25_000, "Example Motors", 0, 200, 210, 150, 4, "Blue")
dealer.give_vehicle(car)

buyer = BankAccount(withdraw_limit=30_000, deposit_limit=30_000, balance=40_000)
bought = dealer.buy_vehicle(0, buyer)
print(bought)
```

Modules:

- `carsim.bank_account`: `BankAccount` (with `withdraw`, `deposit`,
  `can_withdraw`, `can_deposit`), `transfer`, `can_transfer` and
  `TransactionError`, raised when a withdrawal, deposit or transfer is
  not allowed.
- `carsim.vehicle`: the abstract `Vehicle` base class (start, stop,
  drive, drivers, colour and price changes, fuel-usage estimate).
- `carsim.sedan`, `carsim.pickup_truck`, `carsim.motorcycle`: `Sedan`,
  `PickupTruck`, `Motorcycle` and `MotorcycleType`.
- `carsim.person`: `Person`, with age, height and owned vehicles.
- `carsim.dealership`: `VehicleDealership`, with `buy_vehicle`,
  `sell_vehicle` and `give_vehicle`.
- `carsim.world`: `World`, which loads and saves a whole data directory
  at once, and `vehicle_from_dict`, which picks the vehicle class from
  the `type` key.
- `carsim.colorize`: `rize`, which wraps text in ANSI colour codes.
- `carsim.util`: UUID generation, thousands-separated number formatting
  and validated input prompts.

Every class has `to_dict` and `from_dict` for its JSON form, and `save`
writes it under a data directory. Loading a person or dealership that
refers to an unknown vehicle UUID skips that vehicle with a warning.

## Tests

```
pip install .[test]
pytest
```