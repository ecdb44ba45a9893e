def make_asset(url: str, title: str | None = None, asset_id: str = "asset-1") -> dict:
    fields = {"file": {"url": url}}
    if title is not None:
        fields["title"] = title
    return {"sys": {"type": "Asset", "id": asset_id}, "fields": fields}


def make_entry(slug: str, entry_id: str | None = None, **fields) -> dict:
    """
    Raw Contentful blog post entry, links already resolved.
    """
    return {
        "sys": {"type": "Entry", "id": entry_id or f"entry-{slug}"},
        "fields": {"slug": slug, **fields},
    }


def make_document(*blocks: dict) -> dict:
    return {"nodeType": "document", "data": {}, "content": list(blocks)}


def text(value: str, *marks: str) -> dict:
    return {
        "nodeType": "text",
        "value": value,
        "marks": [{"type": mark} for mark in marks],
        "data": {},
    }


def block(node_type: str, *children: dict, **data) -> dict:
    return {"nodeType": node_type, "data": data, "content": list(children)}


class FakeContentClient:
    """
    Minimal in-memory content client stand-in.
    Records each get_entries() params dict in `calls`.
    """

    def __init__(self, items=None, total=None, error: Exception | None = None):
        self.items = items or []
        self.total = total
        self.error = error
        self.calls = []

    async def get_entries(self, params: dict) -> dict:
        self.calls.append(params)
        if self.error:
            raise self.error
        items = list(self.items)
        if "fields.slug" in params:
            items = [i for i in items if i["fields"].get("slug") == params["fields.slug"]]
        if "limit" in params:
            items = items[: params["limit"]]
        total = self.total if self.total is not None else len(items)
        return {"items": items, "total": total}


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    """

    def __init__(self, entries, total=None, error: Exception | None = None):
        self.entries = entries
        self.total = total
        self.error = error

    async def list_post_entries(self):
        if self.error:
            raise self.error
        total = self.total if self.total is not None else len(self.entries)
        return {"items": list(self.entries), "total": total}

    async def get_post_entry(self, slug):
        if self.error:
            raise self.error
        for entry in self.entries:
            if entry["fields"].get("slug") == slug:
                return entry
        return None


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, fetch_posts_return=None, fetch_post_return=None):
        self._fetch_posts_return = fetch_posts_return
        self._fetch_post_return = fetch_post_return
        self.requested_slugs = []

    async def fetch_posts(self):
        return self._fetch_posts_return

    async def fetch_post(self, slug: str):
        self.requested_slugs.append(slug)
        return self._fetch_post_return


class FakeContactSender:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.sent = []

    async def send(self, submission):
        self.sent.append(submission)
        if self.error:
            raise self.error
