from tortoise import fields, models


class MenuItem(models.Model):
    # Size/variant is encoded as a prefix, e.g. "L_orange_chicken"
    product_name = fields.CharField(max_length=128, primary_key=True)
    price = fields.DecimalField(max_digits=12, decimal_places=2, default=0)
    type = fields.CharField(max_length=32)  # entree, side, appetizer, drink, ...
    calories = fields.IntField(null=True)

    class Meta:
        table = "menu"


class RecipeIngredient(models.Model):
    """
    Bill of materials row: one unit of `product_name` consumes
    `inventory_quantity` of `inventory_name`.
    No foreign keys: unknown products or inventory names simply consume nothing.
    """
    id = fields.IntField(primary_key=True)
    product_name = fields.CharField(max_length=128)
    inventory_name = fields.CharField(max_length=128)
    inventory_quantity = fields.FloatField()

    class Meta:
        table = "ingredients"
        unique_together = (("product_name", "inventory_name"),)
        indexes = [
            ("product_name",),    # Recipe lookup at payment time
        ]
