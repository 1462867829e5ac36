import io
import json

import pytest
import requests

from tests.helpers import API_KEY, BASE_URL, load_stub, make_response
from mollie_client.cli import build_parser, run_cli


@pytest.fixture
def patched_session(monkeypatch, session):
    monkeypatch.setattr(requests, "Session", lambda: session)
    return session


def test_parser_requires_a_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_get_prints_json(patched_session):
    patched_session.request.return_value = make_response(200, {"resource": "payment", "id": "tr_WDqYK6vllg"})
    out = io.StringIO()

    code = run_cli(
        ["--env-file", "/nonexistent", "--set", f"MOLLIE_API_KEY={API_KEY}", "get", "payments", "tr_WDqYK6vllg"],
        stdout=out,
    )

    assert code == 0
    assert json.loads(out.getvalue()) == {"resource": "payment", "id": "tr_WDqYK6vllg"}
    assert patched_session.request.call_args.args == ("GET", BASE_URL + "payments/tr_WDqYK6vllg")


def test_list_prints_page_and_cursor(patched_session):
    patched_session.request.return_value = make_response(200, load_stub("payments.json"))
    out = io.StringIO()

    code = run_cli(
        ["--env-file", "/nonexistent", "--set", f"MOLLIE_API_KEY={API_KEY}", "list", "payments", "--limit", "3"],
        stdout=out,
    )

    printed = json.loads(out.getvalue())
    assert code == 0
    assert printed["count"] == 3
    assert len(printed["items"]) == 3
    assert printed["next"] == {"from": "tr_SDkzMggpvx", "limit": 3}
    assert patched_session.request.call_args.kwargs["params"] == {"limit": "3"}


def test_nested_resource_takes_params(patched_session):
    patched_session.request.return_value = make_response(200, load_stub("subscription.json"))
    out = io.StringIO()

    code = run_cli(
        [
            "--env-file", "/nonexistent",
            "--set", f"MOLLIE_API_KEY={API_KEY}",
            "--param", "customerId=cst_pzhEvnttJ2",
            "get", "customers_subscriptions", "sub_wByQa6efm6",
        ],
        stdout=out,
    )

    assert code == 0
    assert patched_session.request.call_args.args[1] == BASE_URL + "customers/cst_pzhEvnttJ2/subscriptions/sub_wByQa6efm6"


def test_invalid_configuration_exits_with_error(patched_session):
    code = run_cli(["--env-file", "/nonexistent", "--set", "MOLLIE_API_KEY=nope", "get", "payments", "tr_x"])

    assert code == 1
    patched_session.request.assert_not_called()


def test_api_error_exits_with_error(patched_session):
    patched_session.request.return_value = make_response(404, {"detail": "No payment exists with token tr_x."})

    code = run_cli(
        ["--env-file", "/nonexistent", "--set", f"MOLLIE_API_KEY={API_KEY}", "get", "payments", "tr_x"],
        stdout=io.StringIO(),
    )

    assert code == 1
