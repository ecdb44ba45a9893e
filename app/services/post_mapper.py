from typing import Any, Dict, List, Optional

from app.schemas.blog import (
    Author,
    AuthorPicture,
    BlogPostDetail,
    BlogPostSummary,
    FeaturedImage,
)
from app.services.rich_text_renderer import document_plain_text
from app.settings import settings
from app.utils import calculate_reading_time, derive_title


def map_post_summary(entry: dict, *, scheme: Optional[str] = None) -> BlogPostSummary:
    """Raw Contentful entry -> BlogPostSummary. Never raises on missing fields."""
    return BlogPostSummary(**_post_data(entry, scheme))


def map_post_detail(entry: dict, *, scheme: Optional[str] = None) -> BlogPostDetail:
    data = _post_data(entry, scheme)
    content = _fields(entry).get("content")
    data["content"] = content if isinstance(content, dict) else None
    return BlogPostDetail(**data)


def _post_data(entry: dict, scheme: Optional[str]) -> Dict[str, Any]:
    scheme = scheme if scheme is not None else settings.ASSET_URL_SCHEME
    fields = _fields(entry)
    slug = str(fields.get("slug") or "")

    return {
        "title": _text(fields.get("title")) or derive_title(slug),
        "slug": slug,
        "featuredImage": map_featured_image(fields.get("featuredImage"), scheme),
        "excerpt": _text(fields.get("excerpt")),
        "publishDate": _text(fields.get("publishDate"))
        or _text(_get_in(entry, "sys", "createdAt"))
        or None,
        "author": map_author(fields.get("author"), scheme),
        "tags": normalize_tags(fields.get("tags")),
        "readingTime": calculate_reading_time(
            document_plain_text(fields.get("content"))
        ),
    }


def map_featured_image(asset: Any, scheme: str) -> Optional[FeaturedImage]:
    url = asset_url(asset, scheme)
    if not url:
        return None
    return FeaturedImage(url=url, title=_text(_get_in(asset, "fields", "title")) or None)


def map_author(author: Any, scheme: str) -> Optional[Author]:
    fields = _get_in(author, "fields")
    if not isinstance(fields, dict) or not fields.get("name"):
        return None
    picture_url = asset_url(fields.get("picture"), scheme)
    return Author(
        name=str(fields["name"]),
        picture=AuthorPicture(url=picture_url) if picture_url else None,
    )


def asset_url(asset: Any, scheme: str) -> Optional[str]:
    """
    Contentful returns protocol-relative asset URLs ("//images.ctfassets.net/...").
    """
    url = _get_in(asset, "fields", "file", "url")
    if not isinstance(url, str) or not url:
        return None
    if url.startswith("//"):
        return f"{scheme}{url}"
    return url


def normalize_tags(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(tag) for tag in value if tag]
    return [str(value)]


def _text(value: Any) -> str:
    return str(value) if value else ""


def _fields(entry: Any) -> dict:
    fields = _get_in(entry, "fields")
    return fields if isinstance(fields, dict) else {}


def _get_in(value: Any, *keys: str) -> Any:
    """Follow nested dict keys, returning None at the first missing level."""
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value
