import pytest

from tests.helpers import load_stub
from mollie_client.core.models import (
    Capture,
    Mandate,
    Method,
    Order,
    OrderLine,
    Payment,
    Refund,
    Shipment,
    Subscription,
    to_api_name,
    to_attribute_name,
)


@pytest.mark.parametrize(
    "api_name, attribute_name",
    [
        ("createdAt", "created_at"),
        ("consumerDateOfBirth", "consumer_date_of_birth"),
        ("_links", "links"),
        ("_embedded", "embedded"),
        ("id", "id"),
    ],
)
def test_name_mapping(api_name, attribute_name):
    assert to_attribute_name(api_name) == attribute_name
    assert to_api_name(attribute_name) == api_name


def test_round_trip_keeps_every_field():
    body = load_stub("subscription.json")
    body["someNewField"] = {"nested": True}

    subscription = Subscription.from_response(body)

    assert subscription.to_dict() == body
    assert list(subscription.to_dict()) == list(body)
    assert subscription.times_remaining == 4
    assert subscription.raw["someNewField"] == {"nested": True}


def test_construction_merges_over_defaults():
    capture = Capture(id="cpt_4qqhO89gsT", amount={"value": "1.00", "currency": "EUR"})

    assert capture.resource == "capture"
    assert capture.links == {"self": None, "payment": None, "documentation": None}
    assert capture.payment_id is None
    assert capture.to_dict() == {
        "id": "cpt_4qqhO89gsT",
        "amount": {"value": "1.00", "currency": "EUR"},
    }


def test_explicit_assignment_is_reflected():
    payment = Payment.from_response({"resource": "payment", "id": "tr_WDqYK6vllg", "description": "Old"})

    payment.description = "New"
    payment.webhook_url = "https://example.org/webhook"

    assert payment.to_dict() == {
        "resource": "payment",
        "id": "tr_WDqYK6vllg",
        "description": "New",
        "webhookUrl": "https://example.org/webhook",
    }


def test_models_compare_by_fields():
    body = {"resource": "refund", "id": "re_4qqhO89gsT", "status": "queued"}
    assert Refund.from_response(body) == Refund(id="re_4qqhO89gsT", status="queued")


@pytest.mark.parametrize(
    "model, valid, invalid",
    [
        (Payment, "tr_WDqYK6vllg", "ord_pbjz8x"),
        (Order, "ord_pbjz8x", "tr_WDqYK6vllg"),
        (Capture, "cpt_4qqhO89gsT", "cst_8wmqcHMN4U"),
        (Subscription, "sub_rVKGtNd6s3", "mdt_h3gAaD5zP"),
        (Mandate, "mdt_h3gAaD5zP", "sub_rVKGtNd6s3"),
        (Shipment, "shp_3wmsgCJN4U", "odl_dgtxyl"),
    ],
)
def test_id_prefixes(model, valid, invalid):
    assert model.has_valid_id(valid)
    assert not model.has_valid_id(invalid)
    assert not model.has_valid_id(None)
    assert not model.has_valid_id("")


def test_methods_have_no_prefix():
    assert Method.has_valid_id("ideal")
    assert not Method.has_valid_id("")


def test_payment_helpers():
    page = load_stub("payments.json")["_embedded"]["payments"]
    open_payment, paid_payment, expired_payment = (Payment.from_response(item) for item in page)

    assert open_payment.is_open()
    assert not open_payment.is_paid()
    assert open_payment.get_checkout_url().startswith("https://www.mollie.com/paymentscreen")
    assert open_payment.get_payment_url() == open_payment.get_checkout_url()
    assert not open_payment.has_refunds()

    assert paid_payment.is_paid()
    assert paid_payment.has_refunds()
    assert not paid_payment.has_chargebacks()
    assert paid_payment.get_checkout_url() is None

    assert expired_payment.is_expired()
    assert not expired_payment.is_canceled()


def test_order_helpers():
    order = Order.from_response(load_stub("order.json"))

    assert order.is_created()
    assert not order.is_paid()
    assert order.order_number == "1337"
    assert order.get_checkout_url() == "https://www.mollie.com/payscreen/order/checkout/pbjz8x"

    lines = order.get_lines()
    assert len(lines) == 1
    assert isinstance(lines[0], OrderLine)
    assert lines[0].vat_rate == "21.00"
    assert lines[0].order_id == order.id


def test_method_image():
    method = Method.from_response(load_stub("methods.json")["_embedded"]["methods"][0])

    assert method.get_image("svg").endswith("ideal.svg")
    assert method.get_image_url("size1x").endswith("ideal.png")
    assert Method(id="paypal").get_image() is None


def test_status_helpers():
    assert Refund(status="processing").is_processing()
    assert Mandate(status="valid").is_valid()
    assert Subscription(status="suspended").is_suspended()
    assert Subscription(canceled_at="2018-04-24T11:41:55+00:00").is_canceled()
    assert Shipment(tracking={"carrier": "PostNL", "url": "https://postnl.nl/t/1"}).get_tracking_url() == "https://postnl.nl/t/1"
    assert not Shipment().has_tracking()
