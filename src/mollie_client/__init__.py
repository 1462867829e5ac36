"""
Public facade for the Mollie API client package.

The most useful pieces are re-exported so integrators can
``from mollie_client import ...`` without navigating the package.
"""

from ._version import __version__
from .api import MollieClient, create_mollie_client
from .core import (
    Capture,
    Chargeback,
    ClientConfig,
    ClientParameters,
    ConfigError,
    Customer,
    Mandate,
    Method,
    Model,
    ModelList,
    MollieApiError,
    NetworkError,
    Order,
    OrderLine,
    Payment,
    Refund,
    RequestValidationError,
    Resource,
    ResponseParseError,
    Shipment,
    Subscription,
    create_http_client,
    load_client_config,
    load_env_file,
)

__all__ = (
    "__version__",
    "Capture",
    "Chargeback",
    "ClientConfig",
    "ClientParameters",
    "ConfigError",
    "Customer",
    "Mandate",
    "Method",
    "Model",
    "ModelList",
    "MollieApiError",
    "MollieClient",
    "NetworkError",
    "Order",
    "OrderLine",
    "Payment",
    "Refund",
    "RequestValidationError",
    "Resource",
    "ResponseParseError",
    "Shipment",
    "Subscription",
    "create_http_client",
    "create_mollie_client",
    "load_client_config",
    "load_env_file",
)
