"""
Public, high-level entry points for talking to the Mollie API.
"""

from __future__ import annotations

from typing import Mapping, Optional

import requests

from .core.client import HttpClient, create_http_client
from .core.config import ClientConfig, ClientParameters, ConfigError, load_client_config
from .core.resource import Resource
from .core.resources import RESOURCE_SPECS, build_resources

__all__ = ["ConfigError", "MollieClient", "create_mollie_client"]


class MollieClient:
    """
    Exposes every resource as a named attribute (``client.payments``,
    ``client.customers_subscriptions``, ...).

    All resources share one :class:`HttpClient` and nothing else.
    """

    payments: Resource
    methods: Resource
    refunds: Resource
    chargebacks: Resource
    customers: Resource
    customers_payments: Resource
    customers_mandates: Resource
    customers_subscriptions: Resource
    payments_refunds: Resource
    payments_chargebacks: Resource
    payments_captures: Resource
    orders: Resource
    orders_lines: Resource
    orders_refunds: Resource
    orders_shipments: Resource

    def __init__(self, config: ClientConfig, http: HttpClient) -> None:
        self.config = config
        self.http = http
        self.resources = build_resources(http)
        for name, resource in self.resources.items():
            setattr(self, name, resource)

    def __repr__(self) -> str:
        mode = "test" if self.config.is_test_mode else "live"
        return f"<MollieClient {mode} {self.config.api_endpoint}>"

    def resource(self, name: str) -> Resource:
        try:
            return self.resources[name]
        except KeyError:
            known = ", ".join(spec.name for spec in RESOURCE_SPECS)
            raise KeyError(f"Unknown resource '{name}' (expected one of: {known})") from None

    def close(self) -> None:
        self.http.session.close()

    def __enter__(self) -> "MollieClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def create_mollie_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    api_key: Optional[str] = None,
    api_endpoint: Optional[str] = None,
    timeout_seconds: Optional[float | int | str] = None,
    ca_bundle: Optional[str] = None,
    user_agent_suffix: Optional[str] = None,
    extra_headers: Optional[Mapping[str, str]] = None,
) -> MollieClient:
    """
    Construct a :class:`MollieClient`.

    Callers can either supply a ready-made :class:`ClientConfig` or let the
    helper assemble one from keyword arguments and environment data. The
    credential is validated before any resource is built.
    """
    if config is not None:
        extras = (
            overrides,
            base,
            parameters,
            api_key,
            api_endpoint,
            timeout_seconds,
            ca_bundle,
            user_agent_suffix,
            extra_headers,
        )
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_client_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            parameters=parameters,
            api_key=api_key,
            api_endpoint=api_endpoint,
            timeout_seconds=timeout_seconds,
            ca_bundle=ca_bundle,
            user_agent_suffix=user_agent_suffix,
            extra_headers=extra_headers,
        )
    return MollieClient(cfg, create_http_client(cfg, session=session))

