"""Total price computation."""

from .errors import InvalidRequestError
from .model import Product


def compute_total(product: Product, quantity: int) -> float:
    """
    Compute the total price of a transaction.

    Parameters
    ----------
    product : Product
        Validated product carrying the unit price.
    quantity : int
        Number of units, strictly positive.

    Returns
    -------
    float
        ``product.price * quantity`` using plain float multiplication.

    Raises
    ------
    InvalidRequestError
        If quantity is not a positive integer.
    """
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise InvalidRequestError(f"quantity must be a positive integer, got {quantity!r}")
    return product.price * quantity
