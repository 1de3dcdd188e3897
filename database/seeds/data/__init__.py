"""
Food Ordering Seed Data Module.

This module contains all seed data definitions separated from seeding logic.
"""

from database.seeds.data.common import (
    CategoryData,
    CustomizationData,
    MenuItemData,
    SeedData,
    find_unresolved_references,
)
from database.seeds.data import menu
from database.seeds.data.menu import SEED_DATA

__all__ = [
    # Type definitions
    "CategoryData",
    "CustomizationData",
    "MenuItemData",
    "SeedData",
    # Reference checks
    "find_unresolved_references",
    # Fixtures
    "menu",
    "SEED_DATA",
]
