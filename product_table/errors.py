"""Exceptions raised by the product table."""


class ProductTableError(Exception):
    """Base class for product table errors."""


class ProductSourceError(ProductTableError):
    """The remote product API could not be read or written."""


class EmptyExportError(ProductTableError):
    """Export was requested for a view with no products."""

    def __init__(self, message: str = "No data to export"):
        super().__init__(message)


class ProductNotFoundError(ProductTableError, KeyError):
    """No product with the requested id exists in the collection."""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product #{product_id} not found")

    def __str__(self) -> str:
        return self.args[0]
