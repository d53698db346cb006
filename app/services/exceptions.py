class PaymentError(Exception):
    """Base class for failures that abort a payment transaction."""


class UnknownInventoryCategoryError(PaymentError):
    def __init__(self, inventory_name: str, category: str):
        self.inventory_name = inventory_name
        self.category = category
        super().__init__(f"Unknown inventory type '{category}' for inventory item '{inventory_name}'")


class OrderIdAllocationError(PaymentError):
    """Every attempt to insert a fresh order id hit an existing order."""
