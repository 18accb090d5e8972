"""Interactive command-line front end for the car simulator."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Iterable
from pathlib import Path

from carsim.bank_account import BankAccount, TransactionError
from carsim.colorize import rize
from carsim.dealership import VehicleDealership
from carsim.motorcycle import Motorcycle, MotorcycleType
from carsim.person import Person
from carsim.pickup_truck import PickupTruck
from carsim.sedan import Sedan
from carsim.util import (
    format_with_commas,
    prompt_full_line_with_validation,
    prompt_with_validation,
)
from carsim.vehicle import Vehicle
from carsim.world import World

BANNER = r"""
   _____           _____ _
  / ____|         / ____(_)
 | |     __ _ _ _| (___  _ _ __ ___
 | |    / _` | '__\___ \| | '_ ` _ \
 | |___| (_| | |  ____) | | | | | | |
  \_____\__,_|_| |_____/|_|_| |_| |_|
"""

MENU = (
    "What would you like to do?\n"
    "-- User actions --\n"
    "  1: Switch current user account\n"
    "  2: View your own info\n"
    "  3: View info about your bank account\n"
    "  4: View your own vehicles\n"
    "  5: Sell your car to a dealership\n"
    "-- Dealership actions --\n"
    "  10: View all dealerships\n"
    "  11: View a dealership's info\n"
    "  12: View a dealership's cars\n"
    "  13: Buy a dealership's car\n"
    "  14: Manufacture a car for the dealership\n"
    "-- System actions --\n"
    "  -2: Delete user account data\n"
    "  -5: Create vehicle dealership\n"
    "  -7: Delete vehicle dealership\n"
    "  -10: Save\n"
    "  -100: Quit\n"
)

VEHICLE_TYPES = ("sedan", "pickup truck", "motorcycle")


def _stdout_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _not_empty(text: str) -> bool:
    return bool(text)


def _non_negative(value: float) -> bool:
    return value >= 0


def _positive(value: float) -> bool:
    return value > 0


def _birth_timestamp(year: int, month: int, day: int) -> int:
    """Unix time of the given local date at the current time of day."""
    now = time.localtime()
    return int(
        time.mktime((year, month, day, now.tm_hour, now.tm_min, now.tm_sec, 0, 0, -1))
    )


class CarSimulatorApp:
    """Menu-driven session over a World, reading answers through ``read``."""

    def __init__(
        self,
        world: World,
        read: Callable[[], str] | None = None,
        write: Callable[[str], None] | None = None,
    ) -> None:
        self.world = world
        self.player: Person | None = None
        self._read = read
        self._write = write or _stdout_write

    # -- prompting helpers -------------------------------------------------

    def _ask_int(self, prompt: str, checker: Callable[[int], bool] | None = None) -> int:
        return prompt_with_validation(prompt, int, checker, self._read, self._write)

    def _ask_float(
        self, prompt: str, checker: Callable[[float], bool] | None = None
    ) -> float:
        return prompt_with_validation(prompt, float, checker, self._read, self._write)

    def _ask_line(
        self,
        prompt: str,
        checker: Callable[[str], bool] | None = None,
        remove_whitespace: bool = True,
    ) -> str:
        return prompt_full_line_with_validation(
            prompt, checker, remove_whitespace, self._read, self._write
        )

    def _ask_index(self, prompt: str, count: int) -> int:
        return self._ask_int(prompt, lambda x: 0 < x <= count) - 1

    def _list(self, items: Iterable[object], separator: str = ". ", indent: str = "") -> None:
        for number, item in enumerate(items, start=1):
            self._write(f"{indent}{number}{separator}{item}\n")

    def _list_dealership_names(self) -> None:
        self._list((d.name for d in self.world.dealerships), indent="  ")

    def _ask_bank_account(self) -> BankAccount:
        self._write(rize("- Banking details -\n", "White", "Blue"))
        min_balance = self._ask_float("Minimum balance: ", _non_negative)
        starting = self._ask_float("Starting balance: ", lambda x: x >= min_balance)
        withdraw_limit = self._ask_float("Withdraw limit: ", _non_negative)
        deposit_limit = self._ask_float("Deposit limit: ", _non_negative)
        return BankAccount(
            withdraw_limit=withdraw_limit,
            deposit_limit=deposit_limit,
            balance=starting,
            min_balance=min_balance,
        )

    # -- object creation ---------------------------------------------------

    def person_from_input(self) -> Person:
        """Ask for a new person's details and return the person."""
        first = self._ask_line("First name: ", _not_empty)
        middle = self._ask_line("Middle name: ", None, False)
        last = self._ask_line("Last name: ", _not_empty)
        year = self._ask_int("Birth year: ", lambda x: x >= 1900)
        month = self._ask_int("Birth month: ", lambda x: 1 <= x <= 12)
        day = self._ask_int("Birth day: ", lambda x: 1 <= x <= 31)
        height = self._ask_float("Height (cm): ", _non_negative)
        account = self._ask_bank_account()
        return Person(
            first_name=first,
            middle_name=middle,
            last_name=last,
            birth_timestamp=_birth_timestamp(year, month, day),
            height=height,
            bank_account=account,
        )

    def dealership_from_input(self) -> VehicleDealership:
        """Ask for a new dealership's details and return the dealership."""
        self._write(rize("-- Create a vehicle dealership --\n", "White", "Green"))
        name = self._ask_line("Name of dealership: ", _not_empty)
        return VehicleDealership(name, self._ask_bank_account())

    def vehicle_from_input(self) -> Vehicle | None:
        """Ask for a new vehicle, give it to a chosen dealership and register it."""
        dealerships = self.world.dealerships
        if not dealerships:
            self._write(
                "ERROR: You cannot generate a vehicle without any vehicle dealerships. "
                "Please make one before making a vehicle."
            )
            return None

        self._write(rize("-- Create a vehicle --\n", "White", "Green"))
        vehicle_type = self._ask_line(
            "Type of vehicle (sedan, pickup truck, motorcycle): ",
            lambda s: s.lower() in VEHICLE_TYPES,
        ).lower()

        name = self._ask_line(
            "Complete name of vehicle (ex. Honda Accord 2023 Touring Hybrid): ", _not_empty
        )
        price = self._ask_float("Price of vehicle: $", _non_negative)
        manufacturer = self._ask_line("Manufacturer: ", _not_empty)
        mileage = self._ask_float("Starting mileage on vehicle (km): ", _non_negative)
        horsepower = self._ask_float("Horsepower available: ", _non_negative)
        max_speed = self._ask_float("Max speed available (km/h): ", _non_negative)
        color = self._ask_line("Color (ex. Canyon River Blue Metallic): ", _not_empty)

        vehicle: Vehicle
        if vehicle_type == "sedan":
            trunk = self._ask_float("Max weight storable in trunk (kg): ", _non_negative)
            cylinders = self._ask_int("Cylinder count in engine: ", _positive)
            vehicle = Sedan(
                name, price, manufacturer, mileage, horsepower, max_speed, trunk, cylinders, color
            )
        elif vehicle_type == "motorcycle":
            engine_size = self._ask_float("Size of engine (CC): ", _positive)
            acceleration = self._ask_float("Max acceleration (m/s^2): ", _positive)
            kind = self._ask_line(
                "Motorcycle Type (sport, cruiser, scooter, touring): ",
                lambda s: s.lower() in {t.value for t in MotorcycleType},
            )
            vehicle = Motorcycle(
                name,
                price,
                manufacturer,
                mileage,
                horsepower,
                max_speed,
                color,
                engine_size,
                acceleration,
                MotorcycleType.parse(kind),
            )
        else:
            bed = self._ask_float("Max weight storable in truck bed (kg): ", _non_negative)
            towing = self._ask_float("Max towing load (kg): ", _non_negative)
            cylinders = self._ask_int("Cylinder count in engine: ", _positive)
            vehicle = PickupTruck(
                name,
                price,
                manufacturer,
                mileage,
                horsepower,
                max_speed,
                bed,
                towing,
                cylinders,
                color,
            )

        self._write(f"Vehicle successfully created: {vehicle}\n")
        self._write("Please choose a dealership to add it under.\n")
        self._list(d.name for d in dealerships)
        index = self._ask_index(
            "Enter the index of the dealership to add the vehicle to: ", len(dealerships)
        )
        dealerships[index].give_vehicle(vehicle)
        self._write(f"Successfully generated vehicle for {dealerships[index].name}!\n")
        self.world.register_vehicle(vehicle)
        return vehicle

    def switch_account(self) -> Person:
        """Let the user import an existing person or create a new one."""
        people = self.world.people
        self._write(rize("List of preloaded people:\n", "Green"))
        self._list(people)
        if not people:
            self._write(
                "  No people profiles could be loaded in :( If you didn't expect this, "
                "check the path of your data files (should be data/people)\n"
            )

        answer = self._ask_line(
            "Would you like to import your account (i, will error if none are imported), "
            "or create a new one (c)? ",
            lambda s: (s == "i" and bool(people)) or s == "c",
        )
        if answer == "c":
            people.append(self.person_from_input())
            self.player = people[-1]
        else:
            index = self._ask_index("Enter the index of the account to import: ", len(people))
            self.player = people[index]

        self._write(f"Your info: {self.player}\n")
        return self.player

    # -- menu actions ------------------------------------------------------

    def _show_info(self) -> None:
        self._write(f"Your current info: {self.player}\n")

    def _show_bank(self) -> None:
        self._write(f"Your bank account info: \n{self.player.bank_account}\n")

    def _show_vehicles(self) -> None:
        self._write("Your vehicle list: \n")
        self._list(self.player.vehicles)
        if not self.player.vehicles:
            self._write("  You have no vehicles :(\n")

    def _sell_vehicle(self) -> None:
        player = self.player
        dealerships = self.world.dealerships
        if not player.vehicles:
            self._write(
                "You cannot sell your vehicle when you don't have any. "
                "Please buy a vehicle and try again.\n"
            )
            return
        if not dealerships:
            self._write(
                "You cannot sell your vehicle when no dealerships exist. "
                "Please make a dealership and try again.\n"
            )
            return

        self._write("Your vehicles:: \n")
        for number, vehicle in enumerate(player.vehicles, start=1):
            self._write(f"{number}: {vehicle.name}, ${format_with_commas(float(vehicle.price))}\n")
        vehicle_index = self._ask_index(
            "Which vehicle would you like to sell? (give index) ", len(player.vehicles)
        )

        self._write("List of all dealerships: \n")
        self._list_dealership_names()
        dealership_index = self._ask_index(
            "Which dealership would you like to sell your vehicle to? (give index) ",
            len(dealerships),
        )

        dealership = dealerships[dealership_index]
        try:
            sold_index = dealership.sell_vehicle(
                player.vehicles[vehicle_index], player.bank_account
            )
        except (TransactionError, ValueError):
            self._write(
                "The transaction could not be completed, likely because the dealership "
                "doesn't have enough money or due to deposit/withdraw limits on either "
                "accounts. Please check these and try again later.\n"
            )
            return

        del player.vehicles[vehicle_index]
        self._write(
            f"The transaction was successful! {dealership.name} now owns this vehicle:\n"
            f"{dealership.vehicles[sold_index]}\n"
        )

    def _list_dealerships(self) -> None:
        self._write("List of all dealerships: \n")
        self._list_dealership_names()
        if not self.world.dealerships:
            self._write("  There are no dealerships :(\n")

    def _dealership_info(self) -> None:
        dealerships = self.world.dealerships
        if not dealerships:
            self._write("There are no dealerships to view.\n")
            return
        index = self._ask_index(
            "Which dealership would like to view more info about? (give index)  ",
            len(dealerships),
        )
        self._write(f"{dealerships[index]}\n")

    def _print_dealership_vehicles(self, dealership: VehicleDealership) -> None:
        self._write(f"Vehicles of {dealership.name}: \n")
        self._list(dealership.vehicles, separator=": ")

    def _dealership_vehicles(self) -> None:
        dealerships = self.world.dealerships
        if not dealerships:
            self._write("There are no dealerships to view.\n")
            return
        index = self._ask_index(
            "Which dealership's vehicles would you like to view? (give index) ",
            len(dealerships),
        )
        self._print_dealership_vehicles(dealerships[index])
        if not dealerships[index].vehicles:
            self._write("  There are no vehicles :(\n")

    def _buy_vehicle(self) -> None:
        dealerships = self.world.dealerships
        if not dealerships:
            self._write("There are no dealerships to view.\n")
            return
        dealership = dealerships[
            self._ask_index(
                "Which dealership's vehicles would like to buy? (give index) ", len(dealerships)
            )
        ]
        self._print_dealership_vehicles(dealership)
        if not dealership.vehicles:
            self._write("  There are no vehicles :(\n")
            return

        vehicle_index = self._ask_index(
            "Which vehicle would like to buy? (give index) ", len(dealership.vehicles)
        )
        try:
            bought = dealership.buy_vehicle(vehicle_index, self.player.bank_account)
        except (TransactionError, IndexError):
            self._write(
                "The transaction could not be completed, likely because you don't have "
                "enough money or deposit/withdraw limits on either accounts. "
                "Please check these.\n"
            )
            return

        self.player.vehicles.append(bought)
        self._write(f"The transaction was successful! You now own this vehicle:\n{bought}\n")

    def _manufacture_vehicle(self) -> None:
        if not self.world.dealerships:
            self._write("There are no dealerships to generate a vehicle for.\n")
            return
        self.vehicle_from_input()

    def _delete_person(self) -> None:
        index = self._ask_index(
            "Enter the index of the account to delete: ", len(self.world.people)
        )
        try:
            self.world.remove_person(index, self.player)
        except ValueError as error:
            self._write(f"{error}\n")
            return
        self._write("Successfully deleted account data.\n")

    def _create_dealership(self) -> None:
        self.world.dealerships.append(self.dealership_from_input())
        self._write("Successfully created a dealership!\n")

    def _delete_dealership(self) -> None:
        dealerships = self.world.dealerships
        if not dealerships:
            self._write("There are no dealerships to delete.\n")
            return
        index = self._ask_index(
            "Enter the index of the dealership to delete: ", len(dealerships)
        )
        self.world.remove_dealership(index)
        self._write("Successfully deleted dealership data.\n")

    def _save(self) -> None:
        self.world.save()
        for vehicle_uuid in self.world.vehicles:
            self._write(f"UUID saved: {vehicle_uuid}\n")
        self._write("Saved all data!\n")

    def handle_choice(self, choice: int) -> bool:
        """Carry out one menu choice; False means the user chose to quit."""
        if choice == -100:
            self._write("Thank you for using the program!\n")
            return False
        actions: dict[int, Callable[[], object]] = {
            1: self.switch_account,
            2: self._show_info,
            3: self._show_bank,
            4: self._show_vehicles,
            5: self._sell_vehicle,
            10: self._list_dealerships,
            11: self._dealership_info,
            12: self._dealership_vehicles,
            13: self._buy_vehicle,
            14: self._manufacture_vehicle,
            -2: self._delete_person,
            -5: self._create_dealership,
            -7: self._delete_dealership,
            -10: self._save,
        }
        action = actions.get(choice)
        if action is None:
            self._write("Invalid input. Please try again.")
        else:
            action()
        return True

    def run(self) -> None:
        """Greet the user, pick an account, then serve the menu until quit."""
        self._write(rize(BANNER, "Orange", "Default", "Bold"))
        self._write(rize("Welcome to the Car Simulator!\n", "Red", "Default", "Bold"))
        self.switch_account()
        self._write("\n\n")
        while True:
            self._write(MENU)
            if not self.handle_choice(self._ask_int("Choice: ")):
                return
            self._ask_line("\nPress enter to continue...", None, False)
            self._write("\n\n")


def main(argv: list[str] | None = None) -> int:
    """Run the simulator on the data directory given on the command line."""
    parser = argparse.ArgumentParser(prog="carsim", description="Car simulator.")
    parser.add_argument(
        "--data-dir", default="data", help="folder holding saved state (default: data)"
    )
    args = parser.parse_args(argv)
    app = CarSimulatorApp(World.load(Path(args.data_dir)))
    try:
        app.run()
    except (EOFError, KeyboardInterrupt):
        _stdout_write("\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())