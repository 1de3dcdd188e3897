"""
Food Ordering Seeders Module.

Reusable seeding logic separated from data definitions.
"""

from database.seeds.seeders.base import BaseSeeder
from database.seeds.seeders.category import CategorySeeder
from database.seeds.seeders.customization import CustomizationSeeder
from database.seeds.seeders.menu import MenuSeeder, MenuSeedResult
from database.seeds.seeders.reset import ResetSeeder

__all__ = [
    "BaseSeeder",
    "CategorySeeder",
    "CustomizationSeeder",
    "MenuSeeder",
    "MenuSeedResult",
    "ResetSeeder",
]
