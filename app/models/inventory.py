from enum import Enum
from tortoise import fields, models


class InventoryCategory(str, Enum):
    PROTEIN = "protein"
    SIDES = "sides"
    PRODUCE = "produce"
    OTHER = "other"
    SAUCES = "sauces"
    CONSUMABLES = "consumables"
    SUPPLIES = "supplies"
    DRINKS = "drinks"


class InventoryItem(models.Model):
    inventory_name = fields.CharField(max_length=128, primary_key=True)
    # Kept as free text: rows written by other tools may carry a category the
    # conversion table does not know, and payment must be able to reject them.
    inventory_type = fields.CharField(max_length=32)
    quantity = fields.FloatField(default=0)  # No floor, may go negative
    batch_quantity = fields.FloatField(null=True)
    recommended_quantity = fields.FloatField(default=0)  # Low stock threshold
    gameday_quantity = fields.FloatField(default=0)

    class Meta:
        table = "inventory"
        indexes = [
            ("inventory_type",),  # Filter by category
        ]
