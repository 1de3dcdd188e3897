"""
Food Ordering - Appwrite Seed Scripts.

Architecture:
- data/: Seed data definitions (constants only)
- seeders/: Reusable seeding logic

Run all seeds:
    python -m database.seeds.run_all_seeds

Seed without rehosting images:
    python -m database.seeds.run_all_seeds --skip-images

Validate seeds:
    python -m database.seeds.validate_menu_seed
"""

from database.seeds.run_all_seeds import SeedReport, run_all_seeds, seed

__all__ = [
    "SeedReport",
    "run_all_seeds",
    "seed",
]
