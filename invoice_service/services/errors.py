"""Domain errors raised by the invoice services."""


class InvalidAmountError(ValueError):
    """A monetary value was NaN or infinite."""


class InvoiceNotFoundError(LookupError):
    def __init__(self, order_id: int):
        self.order_id = order_id
        super().__init__(f"Invoice {order_id} not found")


class OrderServiceError(RuntimeError):
    """The order store could not be reached or answered with an error."""
