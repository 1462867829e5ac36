"""
Generic CRUD facade shared by every Mollie resource.

A :class:`Resource` is configured by a :class:`ResourceSpec` (path, model,
ID prefix, supported operations, parent identifiers) instead of being
subclassed per entity.
"""

from __future__ import annotations

import functools
import warnings
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Dict,
    FrozenSet,
    Mapping,
    Optional,
    Tuple,
    Type,
)
from urllib.parse import quote

from .client import HttpClient
from .errors import MollieApiError, RequestValidationError, ResponseParseError
from .lists import ModelList
from .models import Model, to_api_name

__all__ = [
    "Callback",
    "ParentReference",
    "Resource",
    "ResourceSpec",
]

Callback = Callable[[Optional[MollieApiError], Any], None]

CREATE = "create"
GET = "get"
LIST = "list"
UPDATE = "update"
DELETE = "delete"


@dataclass(frozen=True)
class ParentReference:
    """An identifier that has to be substituted into a nested resource's path."""

    api_name: str
    model: Type[Model]
    label: str


@dataclass(frozen=True)
class ResourceSpec:
    name: str
    path: str
    model: Type[Model]
    embedded_key: str
    label: str
    api_name: str
    operations: FrozenSet[str]
    parents: Tuple[ParentReference, ...] = ()
    required_fields: Tuple[str, ...] = ()


def _accepts_callback(operation: Callable[..., Any]) -> Callable[..., Any]:
    """
    Adapt an operation to the deprecated ``(error, result)`` callback style.

    The callback may be passed as ``callback=`` or, as older callers do, as
    the last positional argument. Errors are handed to the callback instead
    of being raised.
    """

    @functools.wraps(operation)
    def wrapper(self: "Resource", *args: Any, callback: Optional[Callback] = None, **kwargs: Any) -> Any:
        if callback is None and args and callable(args[-1]):
            callback = args[-1]
            args = args[:-1]
        if callback is None:
            return operation(self, *args, **kwargs)

        warnings.warn(
            "Passing a callback is deprecated and will be removed in a future "
            "version; use the returned value instead",
            DeprecationWarning,
            stacklevel=2,
        )
        try:
            result = operation(self, *args, **kwargs)
        except MollieApiError as exc:
            callback(exc, None)
            return None
        callback(None, result)
        return result

    return wrapper


def _to_api_params(
    params: Optional[Mapping[str, Any]],
    extra: Mapping[str, Any],
) -> Dict[str, Any]:
    merged: Dict[str, Any] = {}
    for source in (params or {}, extra):
        for key, value in source.items():
            if key == "from_":
                key = "from"
            merged[to_api_name(key)] = value
    return merged


class Resource:
    """
    Translate ``create/get/list/update/delete`` calls into API requests.

    Every operation performs a single round trip and either returns a model
    (or a :class:`ModelList`) or raises :class:`MollieApiError`.
    """

    def __init__(self, http: HttpClient, spec: ResourceSpec) -> None:
        self.http = http
        self.spec = spec

    def __repr__(self) -> str:
        return f"<Resource {self.spec.name} ({self.spec.api_name})>"

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def model(self) -> Type[Model]:
        return self.spec.model

    # API METHODS

    @_accepts_callback
    def create(self, params: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Model:
        self._require_operation(CREATE)
        body = _to_api_params(params, kwargs)
        path = self._collection_path(body)
        self._check_required_fields(body)
        return self._to_model(self.http.post(path, body))

    @_accepts_callback
    def get(self, id: str, params: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Model:
        self._require_operation(GET)
        self._check_id(id)
        query = _to_api_params(params, kwargs)
        path = self._item_path(id, query)
        return self._to_model(self.http.get(path, params=query))

    @_accepts_callback
    def list(self, params: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> ModelList:
        """
        Fetch one page. Pages are not followed automatically; pass
        ``page.next_page_params()`` to fetch the next one.
        """
        self._require_operation(LIST)
        query = _to_api_params(params, kwargs)
        parent_params = {
            parent.api_name: query[parent.api_name]
            for parent in self.spec.parents
            if parent.api_name in query
        }
        path = self._collection_path(query)
        payload = self.http.get(path, params=query)
        if not isinstance(payload, Mapping):
            raise ResponseParseError(
                "Received a malformed response from the API (expected a list)"
            )
        return ModelList.from_response(
            payload,
            model=self.spec.model,
            embedded_key=self.spec.embedded_key,
            base_params=parent_params,
        )

    @_accepts_callback
    def update(self, id: str, data: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Model:
        self._require_operation(UPDATE)
        self._check_id(id)
        body = _to_api_params(data, kwargs)
        path = self._item_path(id, body)
        return self._to_model(self.http.patch(path, body))

    @_accepts_callback
    def delete(self, id: str, params: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Optional[Model]:
        """
        Delete or cancel an entity.

        Returns the entity in its new state, or ``None`` when the API answers
        with an empty ``204`` response.
        """
        self._require_operation(DELETE)
        self._check_id(id)
        body = _to_api_params(params, kwargs)
        path = self._item_path(id, body)
        payload = self.http.delete(path, body=body or None)
        if payload is None:
            return None
        return self._to_model(payload)

    # ALIASES

    all = list
    cancel = delete
    revoke = delete

    # HELPERS

    def _require_operation(self, operation: str) -> None:
        if operation not in self.spec.operations:
            raise RequestValidationError(
                f"The {self.spec.api_name} does not support the '{operation}' operation"
            )

    def _check_id(self, id: Any) -> None:
        if not self.spec.model.has_valid_id(id):
            raise RequestValidationError(f"The {self.spec.label} id is invalid")

    def _check_required_fields(self, body: Mapping[str, Any]) -> None:
        for name in self.spec.required_fields:
            if body.get(name) in (None, ""):
                raise RequestValidationError(
                    f"The '{name}' parameter is required", field=name
                )
            if name == "amount":
                amount = body[name]
                if not isinstance(amount, Mapping) or not amount.get("currency") or not amount.get("value"):
                    raise RequestValidationError(
                        "The 'amount' parameter must contain a currency and a value",
                        field="amount",
                    )

    def _collection_path(self, params: Dict[str, Any]) -> str:
        """
        Fill the parent identifiers into the path, removing them from ``params``.
        """
        values: Dict[str, str] = {}
        for parent in self.spec.parents:
            parent_id = params.pop(parent.api_name, None)
            if not parent.model.has_valid_id(parent_id):
                raise RequestValidationError(
                    f"The {parent.label} id is invalid", field=parent.api_name
                )
            values[parent.api_name] = quote(parent_id, safe="")
        return self.spec.path.format(**values)

    def _item_path(self, id: str, params: Dict[str, Any]) -> str:
        return f"{self._collection_path(params)}/{quote(id, safe='')}"

    def _to_model(self, payload: Any) -> Model:
        if not isinstance(payload, Mapping):
            raise ResponseParseError(
                f"Received a malformed response from the API (expected a {self.spec.label})"
            )
        return self.spec.model.from_response(payload)
