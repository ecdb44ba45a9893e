import math
import re
from datetime import datetime, timezone
from typing import Optional


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / 200) or 1
    return f"{minutes} min"


def derive_title(slug: str) -> str:
    """Human-readable title from a slug, used when an entry has no title."""
    clean_slug = slug.rsplit("/", 1)[-1]
    clean_slug = re.sub(r"[-_]+", " ", clean_slug).strip()
    return clean_slug.title() or "Untitled"


def parse_publish_date(value: Optional[str]) -> Optional[datetime]:
    """ISO date or datetime -> aware datetime (naive values are taken as UTC)."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
