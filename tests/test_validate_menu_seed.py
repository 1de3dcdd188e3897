"""
Tests for database/seeds/validate_menu_seed.py
"""

from database.seeds.run_all_seeds import seed
from database.seeds.validate_menu_seed import validate_seed


async def test_valid_after_seeding(settings, fake_appwrite, pizza_data):
    await seed(fake_appwrite, pizza_data, settings=settings, skip_images=True)

    assert await validate_seed(fake_appwrite, pizza_data, settings) is True


async def test_missing_link_fails(settings, fake_appwrite, pizza_data):
    await seed(fake_appwrite, pizza_data, settings=settings, skip_images=True)
    fake_appwrite.documents[("db", "menu_customizations")].clear()

    assert await validate_seed(fake_appwrite, pizza_data, settings) is False


async def test_count_mismatch_fails(settings, fake_appwrite, pizza_data):
    await seed(fake_appwrite, pizza_data, settings=settings, skip_images=True)
    await fake_appwrite.create_document("db", "categories", {"name": "Desserts", "description": ""})

    assert await validate_seed(fake_appwrite, pizza_data, settings) is False


async def test_nested_relationship_documents_accepted(settings, fake_appwrite, pizza_data):
    report = await seed(fake_appwrite, pizza_data, settings=settings, skip_images=True)
    menu_doc = fake_appwrite.collection("menu")[0]
    menu_doc["categories"] = {"$id": report.category_ids["Pizza"], "name": "Pizza"}
    for link in fake_appwrite.collection("menu_customizations"):
        link["menu"] = {"$id": link["menu"]}

    assert await validate_seed(fake_appwrite, pizza_data, settings) is True


async def test_dangling_category_fails(settings, fake_appwrite, pizza_data):
    pizza_data["menu"][0]["category_name"] = "Calzones"
    await seed(fake_appwrite, pizza_data, settings=settings, skip_images=True)

    assert await validate_seed(fake_appwrite, pizza_data, settings) is False
