import pytest

from tests.helpers import load_stub
from mollie_client.core.errors import ResponseParseError
from mollie_client.core.lists import ModelList, cursor_from_link
from mollie_client.core.models import Payment


def test_from_response_keeps_order_and_count():
    page = ModelList.from_response(load_stub("payments.json"), model=Payment, embedded_key="payments")

    assert len(page) == 3
    assert page.count == 3
    assert [payment.id for payment in page] == ["tr_7UhSN1zuXS", "tr_2qkhcMzypH", "tr_9uhYN1zuCD"]
    assert all(isinstance(payment, Payment) for payment in page)


def test_cursors_come_from_links():
    page = ModelList.from_response(load_stub("payments.json"), model=Payment, embedded_key="payments")

    assert page.has_next()
    assert not page.has_previous()
    assert page.next_cursor == "tr_SDkzMggpvx"
    assert page.previous_cursor is None
    assert page.next_page_params() == {"from": "tr_SDkzMggpvx", "limit": 3}
    assert page.previous_page_params() is None


def test_empty_collection():
    page = ModelList.from_response(
        {"count": 0, "_embedded": {"payments": []}, "_links": {"self": {"href": "https://api.mollie.com/v2/payments"}}},
        model=Payment,
        embedded_key="payments",
    )

    assert len(page) == 0
    assert page.count == 0
    assert not page.has_next()
    assert not page.has_previous()
    assert page.next_page_params() is None


def test_missing_embedded_key():
    page = ModelList.from_response({"count": 0}, model=Payment, embedded_key="payments")
    assert page == []
    assert page.links == {}


def test_count_defaults_to_length():
    page = ModelList([Payment(id="tr_1"), Payment(id="tr_2")])
    assert page.count == 2


def test_cursor_from_link():
    assert cursor_from_link({"href": "https://api.mollie.com/v2/customers?from=cst_8wmqcHMN4U"}) == "cst_8wmqcHMN4U"
    assert cursor_from_link({"href": "https://api.mollie.com/v2/customers"}) is None
    assert cursor_from_link(None) is None


@pytest.mark.parametrize(
    "payload",
    [
        {"_embedded": {"payments": ["tr_7UhSN1zuXS"]}},
        {"_embedded": {"payments": {"id": "tr_7UhSN1zuXS"}}},
        {"_embedded": []},
        {"_embedded": "payments"},
        {"_embedded": {"payments": []}, "_links": ["self"]},
        {"_embedded": {"payments": []}, "count": "3"},
        {"_embedded": {"payments": []}, "count": True},
    ],
)
def test_wrongly_shaped_collection_is_rejected(payload):
    with pytest.raises(ResponseParseError, match="malformed"):
        ModelList.from_response(payload, model=Payment, embedded_key="payments")


def test_next_link_without_cursor_is_the_last_page():
    page = ModelList.from_response(
        {
            "count": 1,
            "_embedded": {"payments": [{"resource": "payment", "id": "tr_7UhSN1zuXS"}]},
            "_links": {"next": {"href": "https://api.mollie.com/v2/payments?limit=3"}},
        },
        model=Payment,
        embedded_key="payments",
    )

    assert not page.has_next()
    assert page.next_page_params() is None


def test_base_params_are_merged_into_page_params():
    page = ModelList(
        links={"next": {"href": "https://api.mollie.com/v2/customers/cst_8wmqcHMN4U/subscriptions?from=sub_rVKGtNd6s3&limit=1"}},
        base_params={"customerId": "cst_8wmqcHMN4U"},
    )

    assert page.next_page_params() == {"customerId": "cst_8wmqcHMN4U", "from": "sub_rVKGtNd6s3", "limit": 1}
