"""
Model classes for the entities returned by the Mollie API.

Each model is a plain dataclass. Attributes use snake_case names derived from
the camelCase response fields (``createdAt`` becomes ``created_at``,
``_links`` becomes ``links``). The untouched response body is kept in
``raw`` so :meth:`Model.to_dict` can reproduce it field-for-field, including
fields this package does not know about yet.
"""

from __future__ import annotations

import re
from dataclasses import MISSING, dataclass, field, fields
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Type, TypeVar

__all__ = [
    "Capture",
    "Chargeback",
    "Customer",
    "Mandate",
    "Method",
    "Model",
    "Order",
    "OrderLine",
    "Payment",
    "Refund",
    "Shipment",
    "Subscription",
]

_M = TypeVar("_M", bound="Model")

_SPECIAL_NAMES = {"_links": "links", "_embedded": "embedded"}
_SPECIAL_API_NAMES = {value: key for key, value in _SPECIAL_NAMES.items()}
_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_attribute_name(api_name: str) -> str:
    if api_name in _SPECIAL_NAMES:
        return _SPECIAL_NAMES[api_name]
    return _CAMEL_BOUNDARY.sub("_", api_name).lower()


def to_api_name(attribute_name: str) -> str:
    if attribute_name in _SPECIAL_API_NAMES:
        return _SPECIAL_API_NAMES[attribute_name]
    head, *tail = attribute_name.split("_")
    return head + "".join(part.capitalize() for part in tail)


def _link_href(links: Mapping[str, Any], name: str) -> Optional[str]:
    link = links.get(name) if links else None
    if isinstance(link, Mapping):
        return link.get("href")
    return None


def _default_of(model_field) -> Any:
    if model_field.default is not MISSING:
        return model_field.default
    if model_field.default_factory is not MISSING:
        return model_field.default_factory()
    return None


@dataclass
class Model:
    """
    Shared construction rules for every entity.

    ``resource_prefix`` is the literal every valid ID of the entity starts
    with; ``None`` means the entity's IDs are not prefixed.
    """

    resource_prefix: ClassVar[Optional[str]] = None

    resource: Optional[str] = None
    id: Optional[str] = None
    links: Dict[str, Any] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def attribute_names(cls) -> List[str]:
        return [f.name for f in fields(cls) if f.name != "raw"]

    @classmethod
    def from_response(cls: Type[_M], payload: Mapping[str, Any]) -> _M:
        """
        Build a model by merging ``payload`` over the model's defaults.
        """
        known = set(cls.attribute_names())
        values: Dict[str, Any] = {}
        for api_name, value in payload.items():
            name = to_attribute_name(api_name)
            if name in known:
                values[name] = value
        return cls(raw=dict(payload), **values)

    @classmethod
    def has_valid_id(cls, value: Any) -> bool:
        if not isinstance(value, str) or not value:
            return False
        return cls.resource_prefix is None or value.startswith(cls.resource_prefix)

    def to_dict(self) -> Dict[str, Any]:
        """
        Return the entity in the API's wire shape.

        Keys from the original body keep their order; attributes assigned
        afterwards are included when they differ from the default.
        """
        known = set(self.attribute_names())
        data: Dict[str, Any] = {}
        for api_name, value in self.raw.items():
            name = to_attribute_name(api_name)
            data[api_name] = getattr(self, name) if name in known else value

        for model_field in fields(self):
            if model_field.name == "raw":
                continue
            api_name = to_api_name(model_field.name)
            if api_name in data:
                continue
            value = getattr(self, model_field.name)
            if value != _default_of(model_field):
                data[api_name] = value
        return data


@dataclass
class Payment(Model):
    resource_prefix: ClassVar[Optional[str]] = "tr_"

    resource: Optional[str] = "payment"
    mode: Optional[str] = None
    created_at: Optional[str] = None
    status: Optional[str] = None
    is_cancelable: Optional[bool] = None
    authorized_at: Optional[str] = None
    paid_at: Optional[str] = None
    canceled_at: Optional[str] = None
    expires_at: Optional[str] = None
    expired_at: Optional[str] = None
    failed_at: Optional[str] = None
    amount: Optional[Dict[str, str]] = None
    amount_refunded: Optional[Dict[str, str]] = None
    amount_remaining: Optional[Dict[str, str]] = None
    amount_captured: Optional[Dict[str, str]] = None
    amount_charged_back: Optional[Dict[str, str]] = None
    settlement_amount: Optional[Dict[str, str]] = None
    description: Optional[str] = None
    redirect_url: Optional[str] = None
    webhook_url: Optional[str] = None
    method: Optional[str] = None
    metadata: Any = None
    locale: Optional[str] = None
    country_code: Optional[str] = None
    profile_id: Optional[str] = None
    settlement_id: Optional[str] = None
    customer_id: Optional[str] = None
    sequence_type: Optional[str] = None
    mandate_id: Optional[str] = None
    subscription_id: Optional[str] = None
    order_id: Optional[str] = None
    application_fee: Optional[Dict[str, Any]] = None
    details: Optional[Dict[str, Any]] = None

    def is_open(self) -> bool:
        return self.status == "open"

    def is_paid(self) -> bool:
        return self.paid_at is not None

    def is_canceled(self) -> bool:
        return self.canceled_at is not None

    def is_expired(self) -> bool:
        return self.expired_at is not None

    def is_failed(self) -> bool:
        return self.failed_at is not None

    def is_authorized(self) -> bool:
        return self.authorized_at is not None

    def has_refunds(self) -> bool:
        return _link_href(self.links, "refunds") is not None

    def has_chargebacks(self) -> bool:
        return _link_href(self.links, "chargebacks") is not None

    def get_checkout_url(self) -> Optional[str]:
        return _link_href(self.links, "checkout")

    def get_payment_url(self) -> Optional[str]:
        """Older name for :meth:`get_checkout_url`."""
        return self.get_checkout_url()


@dataclass
class Method(Model):
    resource: Optional[str] = "method"
    description: Optional[str] = None
    minimum_amount: Optional[Dict[str, str]] = None
    maximum_amount: Optional[Dict[str, str]] = None
    image: Optional[Dict[str, str]] = None
    pricing: Optional[List[Dict[str, Any]]] = None
    issuers: Optional[List[Dict[str, Any]]] = None
    status: Optional[str] = None

    def get_image(self, size: str = "size2x") -> Optional[str]:
        """
        Return the logo URL; ``size`` is one of ``size1x``, ``size2x`` or ``svg``.
        """
        if not self.image:
            return None
        return self.image.get(size)

    get_image_url = get_image


@dataclass
class Refund(Model):
    resource_prefix: ClassVar[Optional[str]] = "re_"

    resource: Optional[str] = "refund"
    mode: Optional[str] = None
    amount: Optional[Dict[str, str]] = None
    settlement_id: Optional[str] = None
    settlement_amount: Optional[Dict[str, str]] = None
    description: Optional[str] = None
    metadata: Any = None
    status: Optional[str] = None
    lines: Optional[List[Dict[str, Any]]] = None
    payment_id: Optional[str] = None
    order_id: Optional[str] = None
    created_at: Optional[str] = None

    def is_queued(self) -> bool:
        return self.status == "queued"

    def is_pending(self) -> bool:
        return self.status == "pending"

    def is_processing(self) -> bool:
        return self.status == "processing"

    def is_refunded(self) -> bool:
        return self.status == "refunded"

    def is_failed(self) -> bool:
        return self.status == "failed"


@dataclass
class Chargeback(Model):
    resource_prefix: ClassVar[Optional[str]] = "chb_"

    resource: Optional[str] = "chargeback"
    amount: Optional[Dict[str, str]] = None
    settlement_amount: Optional[Dict[str, str]] = None
    created_at: Optional[str] = None
    reason: Optional[Dict[str, str]] = None
    reversed_at: Optional[str] = None
    payment_id: Optional[str] = None
    settlement_id: Optional[str] = None


@dataclass
class Capture(Model):
    resource_prefix: ClassVar[Optional[str]] = "cpt_"

    resource: Optional[str] = "capture"
    mode: Optional[str] = None
    amount: Optional[Dict[str, str]] = None
    settlement_amount: Optional[Dict[str, str]] = None
    payment_id: Optional[str] = None
    shipment_id: Optional[str] = None
    settlement_id: Optional[str] = None
    created_at: Optional[str] = None
    links: Dict[str, Any] = field(
        default_factory=lambda: {"self": None, "payment": None, "documentation": None}
    )


@dataclass
class Customer(Model):
    resource_prefix: ClassVar[Optional[str]] = "cst_"

    resource: Optional[str] = "customer"
    mode: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    locale: Optional[str] = None
    metadata: Any = None
    created_at: Optional[str] = None


@dataclass
class Mandate(Model):
    resource_prefix: ClassVar[Optional[str]] = "mdt_"

    resource: Optional[str] = "mandate"
    mode: Optional[str] = None
    status: Optional[str] = None
    method: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    mandate_reference: Optional[str] = None
    signature_date: Optional[str] = None
    created_at: Optional[str] = None

    def is_valid(self) -> bool:
        return self.status == "valid"


@dataclass
class Subscription(Model):
    resource_prefix: ClassVar[Optional[str]] = "sub_"

    resource: Optional[str] = "subscription"
    mode: Optional[str] = None
    created_at: Optional[str] = None
    status: Optional[str] = None
    amount: Optional[Dict[str, str]] = None
    times: Optional[int] = None
    times_remaining: Optional[int] = None
    interval: Optional[str] = None
    start_date: Optional[str] = None
    next_payment_date: Optional[str] = None
    description: Optional[str] = None
    method: Optional[str] = None
    mandate_id: Optional[str] = None
    canceled_at: Optional[str] = None
    webhook_url: Optional[str] = None
    metadata: Any = None
    application_fee: Optional[Dict[str, Any]] = None
    customer_id: Optional[str] = None

    def is_active(self) -> bool:
        return self.status == "active"

    def is_pending(self) -> bool:
        return self.status == "pending"

    def is_completed(self) -> bool:
        return self.status == "completed"

    def is_suspended(self) -> bool:
        return self.status == "suspended"

    def is_canceled(self) -> bool:
        return self.canceled_at is not None or self.status == "canceled"

    def get_webhook_url(self) -> Optional[str]:
        return self.webhook_url


@dataclass
class OrderLine(Model):
    resource_prefix: ClassVar[Optional[str]] = "odl_"

    resource: Optional[str] = "orderline"
    order_id: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None
    product_url: Optional[str] = None
    image_url: Optional[str] = None
    sku: Optional[str] = None
    metadata: Any = None
    status: Optional[str] = None
    is_cancelable: Optional[bool] = None
    quantity: Optional[int] = None
    quantity_shipped: Optional[int] = None
    amount_shipped: Optional[Dict[str, str]] = None
    quantity_refunded: Optional[int] = None
    amount_refunded: Optional[Dict[str, str]] = None
    quantity_canceled: Optional[int] = None
    amount_canceled: Optional[Dict[str, str]] = None
    shippable_quantity: Optional[int] = None
    refundable_quantity: Optional[int] = None
    cancelable_quantity: Optional[int] = None
    unit_price: Optional[Dict[str, str]] = None
    discount_amount: Optional[Dict[str, str]] = None
    total_amount: Optional[Dict[str, str]] = None
    vat_rate: Optional[str] = None
    vat_amount: Optional[Dict[str, str]] = None
    created_at: Optional[str] = None


@dataclass
class Order(Model):
    resource_prefix: ClassVar[Optional[str]] = "ord_"

    resource: Optional[str] = "order"
    profile_id: Optional[str] = None
    method: Optional[str] = None
    mode: Optional[str] = None
    amount: Optional[Dict[str, str]] = None
    amount_captured: Optional[Dict[str, str]] = None
    amount_refunded: Optional[Dict[str, str]] = None
    status: Optional[str] = None
    is_cancelable: Optional[bool] = None
    billing_address: Optional[Dict[str, str]] = None
    consumer_date_of_birth: Optional[str] = None
    order_number: Optional[str] = None
    shipping_address: Optional[Dict[str, str]] = None
    locale: Optional[str] = None
    metadata: Any = None
    redirect_url: Optional[str] = None
    webhook_url: Optional[str] = None
    created_at: Optional[str] = None
    expires_at: Optional[str] = None
    expired_at: Optional[str] = None
    paid_at: Optional[str] = None
    authorized_at: Optional[str] = None
    canceled_at: Optional[str] = None
    completed_at: Optional[str] = None
    lines: Optional[List[Dict[str, Any]]] = None
    embedded: Optional[Dict[str, Any]] = None

    def is_created(self) -> bool:
        return self.status == "created"

    def is_paid(self) -> bool:
        return self.status == "paid"

    def is_authorized(self) -> bool:
        return self.status == "authorized"

    def is_canceled(self) -> bool:
        return self.status == "canceled"

    def is_shipping(self) -> bool:
        return self.status == "shipping"

    def is_completed(self) -> bool:
        return self.status == "completed"

    def is_expired(self) -> bool:
        return self.status == "expired"

    def get_checkout_url(self) -> Optional[str]:
        return _link_href(self.links, "checkout")

    def get_lines(self) -> List[OrderLine]:
        return [OrderLine.from_response(line) for line in self.lines or []]


@dataclass
class Shipment(Model):
    resource_prefix: ClassVar[Optional[str]] = "shp_"

    resource: Optional[str] = "shipment"
    order_id: Optional[str] = None
    created_at: Optional[str] = None
    tracking: Optional[Dict[str, str]] = None
    lines: Optional[List[Dict[str, Any]]] = None

    def has_tracking(self) -> bool:
        return bool(self.tracking)

    def get_tracking_url(self) -> Optional[str]:
        if not self.tracking:
            return None
        return self.tracking.get("url")
