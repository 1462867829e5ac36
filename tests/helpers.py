import json
from pathlib import Path

import requests

STUBS_DIR = Path(__file__).parent / "stubs"

API_KEY = "test_dHar4XY7LxsDOtmnkVtjNVWXLSlXsM"
BASE_URL = "https://api.mollie.com:443/v2/"


def make_response(status_code, payload=None, *, content=None):
    """Build a real ``requests.Response`` carrying ``payload`` as JSON."""
    response = requests.Response()
    response.status_code = status_code
    if content is None:
        content = b"" if payload is None else json.dumps(payload).encode("utf-8")
    response._content = content
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "application/json"
    return response


def load_stub(name):
    return json.loads((STUBS_DIR / name).read_text(encoding="utf-8"))
