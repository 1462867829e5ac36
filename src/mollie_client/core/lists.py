"""
One page of a collection response.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, Iterable, Mapping, Optional, Type, TypeVar
from urllib.parse import parse_qs, urlsplit

from .errors import ResponseParseError
from .models import Model

__all__ = ["ModelList", "cursor_from_link"]

_M = TypeVar("_M", bound=Model)


def _malformed(reason: str) -> ResponseParseError:
    return ResponseParseError(
        f"Received a malformed response from the API ({reason})"
    )


def cursor_from_link(link: Optional[Mapping[str, Any]]) -> Optional[str]:
    """
    Extract the ``from`` query parameter of a HAL link, if any.
    """
    if not isinstance(link, Mapping) or not link.get("href"):
        return None
    query = parse_qs(urlsplit(link["href"]).query)
    values = query.get("from")
    return values[0] if values else None


def _limit_from_link(link: Optional[Mapping[str, Any]]) -> Optional[int]:
    if not isinstance(link, Mapping) or not link.get("href"):
        return None
    values = parse_qs(urlsplit(link["href"]).query).get("limit")
    if not values:
        return None
    try:
        return int(values[0])
    except ValueError:
        return None


class ModelList(list, Generic[_M]):
    """
    A list of models in API response order plus the page's navigation links.

    An absent ``next`` link means this is the last page. Pages are never
    fetched automatically; pass :meth:`next_page_params` to the resource's
    ``list`` to request the following one. ``base_params`` holds the
    parameters every page of the collection needs (the parent IDs of a
    nested resource) and is merged into the page params.
    """

    def __init__(
        self,
        items: Iterable[_M] = (),
        *,
        count: Optional[int] = None,
        links: Optional[Mapping[str, Any]] = None,
        base_params: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(items)
        self.count = len(self) if count is None else count
        self.links: Dict[str, Any] = dict(links or {})
        self.base_params: Dict[str, Any] = dict(base_params or {})

    def __repr__(self) -> str:
        return f"ModelList(count={self.count}, items={list.__repr__(self)})"

    @classmethod
    def from_response(
        cls,
        payload: Mapping[str, Any],
        *,
        model: Type[_M],
        embedded_key: str,
        base_params: Optional[Mapping[str, Any]] = None,
    ) -> "ModelList[_M]":
        """
        Build a page from a collection body.

        Raises :class:`ResponseParseError` when the body does not have the
        collection shape.
        """
        embedded = payload.get("_embedded", {})
        if not isinstance(embedded, Mapping):
            raise _malformed("'_embedded' is not an object")
        entries = embedded.get(embedded_key, [])
        if not isinstance(entries, list):
            raise _malformed(f"'_embedded.{embedded_key}' is not an array")
        if not all(isinstance(entry, Mapping) for entry in entries):
            raise _malformed(f"'_embedded.{embedded_key}' holds non-object entries")

        links = payload.get("_links")
        if links is not None and not isinstance(links, Mapping):
            raise _malformed("'_links' is not an object")
        count = payload.get("count")
        if count is not None and (isinstance(count, bool) or not isinstance(count, int)):
            raise _malformed("'count' is not an integer")

        return cls(
            [model.from_response(entry) for entry in entries],
            count=count,
            links=links,
            base_params=base_params,
        )

    @property
    def next_cursor(self) -> Optional[str]:
        return cursor_from_link(self.links.get("next"))

    @property
    def previous_cursor(self) -> Optional[str]:
        return cursor_from_link(self.links.get("previous"))

    def has_next(self) -> bool:
        return self.next_cursor is not None

    def has_previous(self) -> bool:
        return self.previous_cursor is not None

    def next_page_params(self) -> Optional[Dict[str, Any]]:
        return self._page_params("next")

    def previous_page_params(self) -> Optional[Dict[str, Any]]:
        return self._page_params("previous")

    def _page_params(self, name: str) -> Optional[Dict[str, Any]]:
        link = self.links.get(name)
        cursor = cursor_from_link(link)
        if cursor is None:
            return None
        params: Dict[str, Any] = dict(self.base_params)
        params["from"] = cursor
        limit = _limit_from_link(link)
        if limit is not None:
            params["limit"] = limit
        return params
