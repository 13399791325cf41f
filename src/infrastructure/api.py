"""
Lookup service client module.

This module provides functions for resolving customer and product ids
against their owning services over HTTP. Responses are classified into
"definitely absent" (HTTP 404) and "could not determine" (any transport
failure, other error status, or malformed body). No retry is attempted.
"""

import logging

import requests
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from core.errors import LookupUnavailableError, ReferenceNotFoundError
from core.model import Customer, Product

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0


def _fetch_entity(base_url: str, kind: str, entity_id: str, model: type[BaseModel], timeout: float) -> BaseModel:
    # Reserved characters must not change which entity is looked up
    url = f"{base_url.rstrip('/')}/{kind}/{requests.utils.quote(entity_id, safe='')}"

    try:
        response = requests.get(url, headers={"Accept": "application/json"}, timeout=timeout)
    except requests.exceptions.RequestException as exc:
        logger.error(f"{kind.capitalize()} lookup {entity_id} failed: {exc}")
        raise LookupUnavailableError(kind, entity_id, str(exc)) from exc

    if response.status_code == 404:
        raise ReferenceNotFoundError(kind, entity_id, response.text.strip())

    try:
        response.raise_for_status()
    except requests.exceptions.HTTPError as exc:
        logger.error(f"{kind.capitalize()} lookup {entity_id} returned {response.status_code}")
        raise LookupUnavailableError(kind, entity_id, str(exc)) from exc

    try:
        return model.model_validate(response.json())
    except (ValueError, PydanticValidationError) as exc:
        logger.error(f"{kind.capitalize()} lookup {entity_id} returned malformed data: {exc}")
        raise LookupUnavailableError(kind, entity_id, f"malformed response: {exc}") from exc


def fetch_customer(customer_service_url: str, customer_id: str, timeout: float = DEFAULT_TIMEOUT) -> Customer:
    """
    Fetch a customer from the customer service.

    Parameters
    ----------
    customer_service_url : str
        Customer service base URL (e.g., 'http://customer-service:8081').
    customer_id : str
        Customer identifier.
    timeout : float, optional
        Request timeout in seconds, by default 5.0.

    Returns
    -------
    Customer
        Parsed customer projection.

    Raises
    ------
    ReferenceNotFoundError
        If the service answers 404.
    LookupUnavailableError
        For any other failure.
    """
    return _fetch_entity(customer_service_url, "customer", customer_id, Customer, timeout)


def fetch_product(product_service_url: str, product_id: str, timeout: float = DEFAULT_TIMEOUT) -> Product:
    """
    Fetch a product from the product service.

    Parameters
    ----------
    product_service_url : str
        Product service base URL (e.g., 'http://product-service:8082').
    product_id : str
        Product identifier.
    timeout : float, optional
        Request timeout in seconds, by default 5.0.

    Returns
    -------
    Product
        Parsed product projection, including the unit price.

    Raises
    ------
    ReferenceNotFoundError
        If the service answers 404.
    LookupUnavailableError
        For any other failure.
    """
    return _fetch_entity(product_service_url, "product", product_id, Product, timeout)


class CustomerServiceClient:
    """Customer lookup backed by the customer service HTTP API."""

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url
        self.timeout = timeout

    def get_customer(self, customer_id: str) -> Customer:
        return fetch_customer(self.base_url, customer_id, timeout=self.timeout)


class ProductServiceClient:
    """Product lookup backed by the product service HTTP API."""

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url
        self.timeout = timeout

    def get_product(self, product_id: str) -> Product:
        return fetch_product(self.base_url, product_id, timeout=self.timeout)
