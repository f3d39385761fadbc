"""Product domain exceptions.

Raised by the service layer when an operation references a product that
is not in the store. The router catches them and answers with an
empty-bodied 404.
"""


class ProductNotFound(Exception):
    """The referenced product id does not exist."""

    def __init__(self, product_id: int) -> None:
        self.product_id = product_id
        super().__init__(f"Product not found with id: {product_id}")
