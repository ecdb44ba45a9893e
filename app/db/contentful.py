import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from app.settings import Settings, settings

logger = logging.getLogger(__name__)

LinkKey = Tuple[Optional[str], Optional[str]]


class ContentServiceError(Exception):
    """The content service could not answer a query (transport, auth or payload)."""


class ContentfulClient:
    """
    Thin async wrapper around the Contentful Content Delivery API.
    Linked entries and assets are resolved into the returned items.
    """

    def __init__(
        self,
        base_url: str,
        access_token: str,
        timeout: float = 10.0,
        include_depth: int = 2,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.include_depth = include_depth
        self.http = httpx.AsyncClient(
            base_url=base_url,
            headers={"Authorization": f"Bearer {access_token}"},
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    @classmethod
    def from_settings(cls, current_settings: Settings) -> "ContentfulClient":
        return cls(
            base_url=current_settings.contentful_url,
            access_token=current_settings.CONTENTFUL_ACCESS_TOKEN,
            timeout=current_settings.CONTENTFUL_TIMEOUT,
            include_depth=current_settings.CONTENTFUL_INCLUDE_DEPTH,
        )

    async def get_entries(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """Query /entries and return {"items": [...resolved...], "total": int}."""
        query = {"include": self.include_depth, **params}
        try:
            response = await self.http.get("/entries", params=query)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            raise ContentServiceError(
                f"Content service returned HTTP {e.response.status_code}"
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ContentServiceError(f"Content service request failed: {e}") from e
        except ValueError as e:
            raise ContentServiceError("Content service returned invalid JSON") from e

        check_payload(payload)
        items = resolve_links(payload)
        total = payload.get("total")
        return {"items": items, "total": total if isinstance(total, int) else len(items)}

    async def aclose(self) -> None:
        await self.http.aclose()


async def get_contentful():
    """
    Request-scoped content client, closed once the request is done.
    """
    client = ContentfulClient.from_settings(settings)
    try:
        yield client
    finally:
        await client.aclose()


def check_payload(payload: Any) -> None:
    """Raise ContentServiceError unless items and includes hold records."""
    if not isinstance(payload, dict) or not isinstance(payload.get("items"), list):
        raise ContentServiceError("Content service response has no items")
    if not all(isinstance(item, dict) for item in payload["items"]):
        raise ContentServiceError("Content service returned a non-object item")

    includes = payload.get("includes")
    if includes is None:
        return
    if not isinstance(includes, dict):
        raise ContentServiceError("Content service includes is not an object")
    for link_type in ("Entry", "Asset"):
        records = includes.get(link_type)
        if records is None:
            continue
        if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
            raise ContentServiceError(f"Content service includes.{link_type} is malformed")


def resolve_links(payload: Dict[str, Any]) -> List[dict]:
    """
    Replace link objects inside each item with the linked record from
    `includes`. Links that cannot be resolved become None (or are dropped
    from lists). Expects a payload that passed check_payload().
    """
    index: Dict[LinkKey, dict] = {}
    includes = payload.get("includes") or {}
    for link_type in ("Entry", "Asset"):
        for record in includes.get(link_type) or []:
            index[(link_type, _sys_id(record))] = record
    for item in payload["items"]:
        index.setdefault(("Entry", _sys_id(item)), item)

    return [_resolve_record(item, index, ()) for item in payload["items"]]


def _sys(record: dict) -> dict:
    sys = record.get("sys")
    return sys if isinstance(sys, dict) else {}


def _sys_id(record: dict) -> Optional[str]:
    sys_id = _sys(record).get("id")
    return sys_id if isinstance(sys_id, str) else None


def _is_link(value: Any) -> bool:
    return (
        isinstance(value, dict)
        and isinstance(value.get("sys"), dict)
        and value["sys"].get("type") == "Link"
    )


def _resolve_record(record: dict, index: Dict[LinkKey, dict], trail: tuple) -> dict:
    key = (_sys(record).get("type"), _sys_id(record))
    fields = record.get("fields")
    # cyclic references are returned as-is
    if key in trail or not isinstance(fields, dict):
        return record

    trail = trail + (key,)
    return {
        **record,
        "fields": {
            name: _resolve_value(value, index, trail) for name, value in fields.items()
        },
    }


def _resolve_value(value: Any, index: Dict[LinkKey, dict], trail: tuple) -> Any:
    if _is_link(value):
        link = value["sys"]
        link_type = link.get("linkType")
        target = index.get((link_type, _sys_id(value))) if isinstance(link_type, str) else None
        if target is None:
            logger.debug(f"Unresolved {link.get('linkType')} link: {link.get('id')}")
            return None
        return _resolve_record(target, index, trail)

    if isinstance(value, list):
        resolved = (_resolve_value(v, index, trail) for v in value)
        return [
            v
            for v, original in zip(resolved, value)
            if not (v is None and _is_link(original))
        ]

    if isinstance(value, dict):
        return {k: _resolve_value(v, index, trail) for k, v in value.items()}

    return value
