"""
Core primitives: configuration, transport, errors, models and resources.
"""

from .client import HttpClient, build_user_agent, create_http_client
from .config import (
    DEFAULT_API_ENDPOINT,
    ClientConfig,
    ClientParameters,
    ConfigError,
    load_client_config,
)
from .environment import ClientEnvironment, build_environment, load_env_file
from .errors import (
    MollieApiError,
    NetworkError,
    RequestValidationError,
    ResponseParseError,
)
from .lists import ModelList
from .models import (
    Capture,
    Chargeback,
    Customer,
    Mandate,
    Method,
    Model,
    Order,
    OrderLine,
    Payment,
    Refund,
    Shipment,
    Subscription,
)
from .resource import ParentReference, Resource, ResourceSpec
from .resources import RESOURCE_SPECS, build_resources

__all__ = [
    "DEFAULT_API_ENDPOINT",
    "RESOURCE_SPECS",
    "Capture",
    "Chargeback",
    "ClientConfig",
    "ClientEnvironment",
    "ClientParameters",
    "ConfigError",
    "Customer",
    "HttpClient",
    "Mandate",
    "Method",
    "Model",
    "ModelList",
    "MollieApiError",
    "NetworkError",
    "Order",
    "OrderLine",
    "ParentReference",
    "Payment",
    "Refund",
    "RequestValidationError",
    "Resource",
    "ResourceSpec",
    "ResponseParseError",
    "Shipment",
    "Subscription",
    "build_environment",
    "build_resources",
    "build_user_agent",
    "create_http_client",
    "load_client_config",
    "load_env_file",
]
