"""
Cross-service reference validation.

Both the customer and the product must resolve in their respective services
before a transaction may be persisted. The customer is checked first and the
first failure short-circuits: the product service is never called for a
request whose customer does not resolve.
"""

import logging

from .errors import ReferenceNotFoundError
from .model import Customer, Product, TransactionRequest
from .protocol import CustomerLookupProtocol, ProductLookupProtocol

logger = logging.getLogger(__name__)


def validate_customer(customers: CustomerLookupProtocol, customer_id: str) -> Customer:
    """
    Resolve a customer id against the customer service.

    Parameters
    ----------
    customers : CustomerLookupProtocol
        Customer lookup collaborator.
    customer_id : str
        Identifier supplied by the caller.

    Returns
    -------
    Customer
        The resolved customer.

    Raises
    ------
    ReferenceNotFoundError
        If the customer does not exist.
    LookupUnavailableError
        If existence could not be determined.
    """
    try:
        return customers.get_customer(customer_id)
    except ReferenceNotFoundError:
        logger.warning(f"Customer validation failed: {customer_id} not found")
        raise


def validate_product(products: ProductLookupProtocol, product_id: str) -> Product:
    """
    Resolve a product id against the product service.

    Parameters
    ----------
    products : ProductLookupProtocol
        Product lookup collaborator.
    product_id : str
        Identifier supplied by the caller.

    Returns
    -------
    Product
        The resolved product, including its unit price.

    Raises
    ------
    ReferenceNotFoundError
        If the product does not exist.
    LookupUnavailableError
        If existence could not be determined.
    """
    try:
        return products.get_product(product_id)
    except ReferenceNotFoundError:
        logger.warning(f"Product validation failed: {product_id} not found")
        raise


def validate_references(
    customers: CustomerLookupProtocol, products: ProductLookupProtocol, request: TransactionRequest
) -> tuple[Customer, Product]:
    """Validate customer then product, returning both on success."""
    customer = validate_customer(customers, request.customer_id)
    product = validate_product(products, request.product_id)
    logger.debug(f"References validated: customer={customer.customer_id} product={product.product_id}")
    return customer, product
