"""A terminal car simulator with people, bank accounts, vehicles and dealerships."""

__version__ = "1.0.0"
__all__ = [
    "bank_account",
    "cli",
    "colorize",
    "dealership",
    "motorcycle",
    "person",
    "pickup_truck",
    "sedan",
    "util",
    "vehicle",
    "world",
]