"""
Configuration objects and helpers for the Mollie client.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .environment import build_environment

__all__ = [
    "DEFAULT_API_ENDPOINT",
    "ConfigError",
    "ClientConfig",
    "ClientParameters",
    "load_client_config",
]

DEFAULT_API_ENDPOINT = "https://api.mollie.com:443/v2/"
DEFAULT_TIMEOUT_SECONDS = 30.0

_API_KEY_PATTERN = re.compile(r"^(live|test)_\w{30,}$")
_ACCESS_TOKEN_PATTERN = re.compile(r"^access_\w+$")

_PARAMETER_TO_ENV_KEY = {
    "api_key": "MOLLIE_API_KEY",
    "api_endpoint": "MOLLIE_API_ENDPOINT",
    "timeout_seconds": "MOLLIE_TIMEOUT_SECONDS",
    "ca_bundle": "MOLLIE_CA_BUNDLE",
    "user_agent_suffix": "MOLLIE_USER_AGENT_SUFFIX",
}


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


@dataclass(frozen=True)
class ClientParameters:
    """
    Explicit parameter bundle for constructing :class:`ClientConfig`.

    Callers can either instantiate this helper or pass the individual keyword
    arguments directly to :func:`load_client_config`.
    """

    api_key: Optional[str] = None
    api_endpoint: Optional[str] = None
    timeout_seconds: Optional[float | int | str] = None
    ca_bundle: Optional[str] = None
    user_agent_suffix: Optional[str] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = str(value)
        return overrides


def _collect_parameter_overrides(
    parameters: Optional[ClientParameters],
    explicit: Mapping[str, Any],
) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    if parameters is not None:
        overrides.update(parameters.as_overrides())

    for key, value in explicit.items():
        if value is None:
            continue
        overrides[_PARAMETER_TO_ENV_KEY[key]] = str(value)
    return overrides


def validate_api_key(raw_key: Optional[str]) -> str:
    if raw_key is None:
        raise ConfigError("MOLLIE_API_KEY must be provided")
    key = raw_key.strip()
    if not key:
        raise ConfigError("MOLLIE_API_KEY must not be empty")
    if not (_API_KEY_PATTERN.match(key) or _ACCESS_TOKEN_PATTERN.match(key)):
        raise ConfigError(
            "MOLLIE_API_KEY must look like 'test_...' or 'live_...' "
            "(at least 30 characters after the prefix) or 'access_...'"
        )
    return key


def _normalize_endpoint(raw_endpoint: str) -> str:
    endpoint = raw_endpoint.strip()
    if not endpoint.startswith("https://"):
        raise ConfigError("MOLLIE_API_ENDPOINT must be an https:// URL")
    return endpoint.rstrip("/") + "/"


def _parse_timeout(raw_timeout: Any) -> float:
    if isinstance(raw_timeout, bool):
        raise ConfigError(
            f"MOLLIE_TIMEOUT_SECONDS must be a number, got '{raw_timeout}'"
        )
    try:
        timeout = float(raw_timeout)
    except (TypeError, ValueError) as exc:
        raise ConfigError(
            f"MOLLIE_TIMEOUT_SECONDS must be a number, got '{raw_timeout}'"
        ) from exc
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigError("MOLLIE_TIMEOUT_SECONDS must be a finite number greater than zero")
    return timeout


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    api_endpoint: str = DEFAULT_API_ENDPOINT
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    ca_bundle: Optional[str] = None
    user_agent_suffix: Optional[str] = None
    extra_headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "api_key", validate_api_key(self.api_key))
        object.__setattr__(self, "api_endpoint", _normalize_endpoint(self.api_endpoint))
        object.__setattr__(self, "timeout_seconds", _parse_timeout(self.timeout_seconds))

    @property
    def is_test_mode(self) -> bool:
        return self.api_key.startswith("test_")

    @property
    def uses_access_token(self) -> bool:
        return self.api_key.startswith("access_")

    @classmethod
    def from_mapping(
        cls,
        values: Mapping[str, str],
        *,
        extra_headers: Optional[Mapping[str, str]] = None,
    ) -> "ClientConfig":
        timeout_raw = values.get("MOLLIE_TIMEOUT_SECONDS")
        return cls(
            api_key=validate_api_key(values.get("MOLLIE_API_KEY")),
            api_endpoint=values.get("MOLLIE_API_ENDPOINT") or DEFAULT_API_ENDPOINT,
            timeout_seconds=(
                _parse_timeout(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT_SECONDS
            ),
            ca_bundle=values.get("MOLLIE_CA_BUNDLE") or None,
            user_agent_suffix=values.get("MOLLIE_USER_AGENT_SUFFIX") or None,
            extra_headers=dict(extra_headers or {}),
        )

    @classmethod
    def from_env(
        cls,
        *,
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
    ) -> "ClientConfig":
        parameter_overrides = _collect_parameter_overrides(
            parameters,
            {
                "api_key": api_key,
                "api_endpoint": api_endpoint,
                "timeout_seconds": timeout_seconds,
                "ca_bundle": ca_bundle,
                "user_agent_suffix": user_agent_suffix,
            },
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(environment.variables, extra_headers=extra_headers)


def load_client_config(
    *,
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
) -> ClientConfig:
    """
    Convenience wrapper that mirrors :meth:`ClientConfig.from_env`.

    The configuration can be provided through environment variables, a
    ``.env`` file, direct keyword arguments, or any combination of the three.
    """
    return ClientConfig.from_env(
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
