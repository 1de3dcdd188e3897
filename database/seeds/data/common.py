"""
Food Ordering Seed Data - Common Types and Reference Checks.

This module defines TypedDict types for seed data and the helper that
reports menu references which do not resolve.
"""

from typing import TypedDict


# =============================================================================
# Type Definitions
# =============================================================================

class CategoryData(TypedDict):
    """Menu category data structure."""
    name: str
    description: str


class CustomizationData(TypedDict):
    """Customization data structure."""
    name: str
    price: float
    type: str  # "topping" | "side" | "size" | "crust" | "bread" | "spice" | "base" | "sauce"


class MenuItemData(TypedDict):
    """Menu item data structure."""
    name: str
    description: str
    image_url: str
    price: float
    rating: float
    calories: int
    protein: int
    category_name: str
    customizations: list[str]  # customization names


class SeedData(TypedDict):
    """Complete fixture consumed by the seeder."""
    categories: list[CategoryData]
    customizations: list[CustomizationData]
    menu: list[MenuItemData]


# =============================================================================
# Reference Checks
# =============================================================================

def find_unresolved_references(data: SeedData) -> list[str]:
    """
    List menu references that point to names missing from the fixture.

    Returns:
        Human-readable descriptions, e.g.
        "Margherita: unknown category 'Pizzas'"
    """
    category_names = {category["name"] for category in data["categories"]}
    customization_names = {cus["name"] for cus in data["customizations"]}

    problems = []
    for item in data["menu"]:
        if item["category_name"] not in category_names:
            problems.append(f"{item['name']}: unknown category '{item['category_name']}'")
        for cus_name in item["customizations"]:
            if cus_name not in customization_names:
                problems.append(f"{item['name']}: unknown customization '{cus_name}'")
    return problems
