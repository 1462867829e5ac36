"""
The resources exposed by the client, one :class:`ResourceSpec` each.
"""

from __future__ import annotations

from typing import Dict

from .client import HttpClient
from .models import (
    Capture,
    Chargeback,
    Customer,
    Mandate,
    Method,
    Order,
    OrderLine,
    Payment,
    Refund,
    Shipment,
    Subscription,
)
from .resource import (
    CREATE,
    DELETE,
    GET,
    LIST,
    UPDATE,
    ParentReference,
    Resource,
    ResourceSpec,
)

__all__ = ["RESOURCE_SPECS", "build_resources"]

_CUSTOMER = ParentReference(api_name="customerId", model=Customer, label="customer")
_PAYMENT = ParentReference(api_name="paymentId", model=Payment, label="payment")
_ORDER = ParentReference(api_name="orderId", model=Order, label="order")

_CRUD = frozenset({CREATE, GET, LIST, UPDATE, DELETE})
_READ_ONLY = frozenset({GET, LIST})

RESOURCE_SPECS = (
    ResourceSpec(
        name="payments",
        path="payments",
        model=Payment,
        embedded_key="payments",
        label="payment",
        api_name="Payments API",
        operations=_CRUD,
        required_fields=("amount", "description", "redirectUrl"),
    ),
    ResourceSpec(
        name="methods",
        path="methods",
        model=Method,
        embedded_key="methods",
        label="method",
        api_name="Methods API",
        operations=_READ_ONLY,
    ),
    ResourceSpec(
        name="refunds",
        path="refunds",
        model=Refund,
        embedded_key="refunds",
        label="refund",
        api_name="Refunds API",
        operations=frozenset({LIST}),
    ),
    ResourceSpec(
        name="chargebacks",
        path="chargebacks",
        model=Chargeback,
        embedded_key="chargebacks",
        label="chargeback",
        api_name="Chargebacks API",
        operations=frozenset({LIST}),
    ),
    ResourceSpec(
        name="customers",
        path="customers",
        model=Customer,
        embedded_key="customers",
        label="customer",
        api_name="Customers API",
        operations=_CRUD,
    ),
    ResourceSpec(
        name="customers_payments",
        path="customers/{customerId}/payments",
        model=Payment,
        embedded_key="payments",
        label="payment",
        api_name="Customers Payments API",
        operations=frozenset({CREATE, LIST}),
        parents=(_CUSTOMER,),
        required_fields=("amount", "description"),
    ),
    ResourceSpec(
        name="customers_mandates",
        path="customers/{customerId}/mandates",
        model=Mandate,
        embedded_key="mandates",
        label="mandate",
        api_name="Mandates API",
        operations=frozenset({CREATE, GET, LIST, DELETE}),
        parents=(_CUSTOMER,),
        required_fields=("method", "consumerName"),
    ),
    ResourceSpec(
        name="customers_subscriptions",
        path="customers/{customerId}/subscriptions",
        model=Subscription,
        embedded_key="subscriptions",
        label="subscription",
        api_name="Subscriptions API",
        operations=_CRUD,
        parents=(_CUSTOMER,),
        required_fields=("amount", "interval", "description"),
    ),
    ResourceSpec(
        name="payments_refunds",
        path="payments/{paymentId}/refunds",
        model=Refund,
        embedded_key="refunds",
        label="refund",
        api_name="Refunds API",
        operations=frozenset({CREATE, GET, LIST, DELETE}),
        parents=(_PAYMENT,),
        required_fields=("amount",),
    ),
    ResourceSpec(
        name="payments_chargebacks",
        path="payments/{paymentId}/chargebacks",
        model=Chargeback,
        embedded_key="chargebacks",
        label="chargeback",
        api_name="Chargebacks API",
        operations=_READ_ONLY,
        parents=(_PAYMENT,),
    ),
    ResourceSpec(
        name="payments_captures",
        path="payments/{paymentId}/captures",
        model=Capture,
        embedded_key="captures",
        label="capture",
        api_name="Captures API",
        operations=_READ_ONLY,
        parents=(_PAYMENT,),
    ),
    ResourceSpec(
        name="orders",
        path="orders",
        model=Order,
        embedded_key="orders",
        label="order",
        api_name="Orders API",
        operations=_CRUD,
        required_fields=(
            "amount",
            "orderNumber",
            "lines",
            "billingAddress",
            "redirectUrl",
            "locale",
        ),
    ),
    ResourceSpec(
        name="orders_lines",
        path="orders/{orderId}/lines",
        model=OrderLine,
        embedded_key="lines",
        label="order line",
        api_name="Order Lines API",
        operations=frozenset({UPDATE}),
        parents=(_ORDER,),
    ),
    ResourceSpec(
        name="orders_refunds",
        path="orders/{orderId}/refunds",
        model=Refund,
        embedded_key="refunds",
        label="refund",
        api_name="Order Refunds API",
        operations=frozenset({CREATE, LIST}),
        parents=(_ORDER,),
        required_fields=("lines",),
    ),
    ResourceSpec(
        name="orders_shipments",
        path="orders/{orderId}/shipments",
        model=Shipment,
        embedded_key="shipments",
        label="shipment",
        api_name="Shipments API",
        operations=frozenset({CREATE, GET, LIST, UPDATE}),
        parents=(_ORDER,),
    ),
)


def build_resources(http: HttpClient) -> Dict[str, Resource]:
    """
    Instantiate every resource against the same :class:`HttpClient`.
    """
    return {spec.name: Resource(http, spec) for spec in RESOURCE_SPECS}
