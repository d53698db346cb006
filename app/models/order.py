from tortoise import fields, models


class Order(models.Model):
    # 6-digit human-facing id drawn by the application; the primary key
    # constraint is what guarantees uniqueness across concurrent terminals.
    id = fields.IntField(primary_key=True, generated=False)
    name = fields.CharField(max_length=64)  # employee name or "Kiosk"
    total = fields.DecimalField(max_digits=12, decimal_places=2, default=0)
    time_stamp = fields.DatetimeField()

    class Meta:
        table = "orders"
        indexes = [
            ("time_stamp",),          # Daily kitchen/report queries
            ("name", "time_stamp"),   # Composite: kiosk orders of the day
        ]


class OrderLine(models.Model):
    id = fields.IntField(primary_key=True)
    order = fields.ForeignKeyField("models.Order", related_name="lines")
    product_name = fields.CharField(max_length=128)
    quantity = fields.IntField()
    price = fields.DecimalField(max_digits=12, decimal_places=2)

    class Meta:
        table = "order_details"
        indexes = [
            ("order_id",),       # Order line items
            ("product_name",),   # Item popularity
        ]
