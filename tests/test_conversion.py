import pytest
from app.models.inventory import InventoryCategory
from app.services.conversion import CONVERSION_FACTORS, conversion_factor, consumed_units
from app.services.exceptions import UnknownInventoryCategoryError


def test_every_category_has_a_factor():
    assert set(CONVERSION_FACTORS) == set(InventoryCategory)


@pytest.mark.parametrize("category", ["protein", "sides", "produce", "other"])
def test_bulk_food_is_counted_in_pounds(category):
    assert conversion_factor(category) == 0.0625


def test_sauces_are_counted_in_gallons():
    assert conversion_factor("sauces") == 0.0078125


@pytest.mark.parametrize("category", ["consumables", "supplies", "drinks"])
def test_packaged_goods_are_counted_each(category):
    assert conversion_factor(category) == 1.0


def test_protein_consumption():
    # 8 oz per plate, 2 plates sold
    assert consumed_units(8, InventoryCategory.PROTEIN, 2) == 1.0


def test_sauce_consumption():
    assert consumed_units(2, "sauces", 4) == pytest.approx(0.0625)


def test_unknown_category_raises():
    with pytest.raises(UnknownInventoryCategoryError) as excinfo:
        consumed_units(1, "seasoning", 1, inventory_name="five_spice")

    assert excinfo.value.category == "seasoning"
    assert excinfo.value.inventory_name == "five_spice"
    assert "seasoning" in str(excinfo.value)


def test_category_lookup_is_case_sensitive():
    with pytest.raises(UnknownInventoryCategoryError):
        conversion_factor("Protein")
