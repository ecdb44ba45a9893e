import asyncio

import pytest

from app.db.contentful import ContentServiceError
from app.repos.posts_repo import ContentfulPostsRepo
from app.settings import settings
from tests.conftest import FakeContentClient, make_entry


def test_list_post_entries_queries_content_type_newest_first():
    client = FakeContentClient([make_entry("a"), make_entry("b")], total=5)
    repo = ContentfulPostsRepo(client)

    result = asyncio.run(repo.list_post_entries())

    assert client.calls == [
        {"content_type": settings.BLOG_CONTENT_TYPE, "order": "-fields.publishDate"}
    ]
    assert [i["fields"]["slug"] for i in result["items"]] == ["a", "b"]
    assert result["total"] == 5


def test_get_post_entry_filters_by_slug_with_limit():
    client = FakeContentClient([make_entry("a"), make_entry("b")])
    repo = ContentfulPostsRepo(client, content_type="article")

    entry = asyncio.run(repo.get_post_entry("b"))

    assert entry["fields"]["slug"] == "b"
    assert client.calls == [{"content_type": "article", "fields.slug": "b", "limit": 1}]


def test_get_post_entry_returns_none_when_no_match():
    repo = ContentfulPostsRepo(FakeContentClient([make_entry("a")]))

    assert asyncio.run(repo.get_post_entry("nope")) is None


def test_repo_propagates_service_errors():
    repo = ContentfulPostsRepo(FakeContentClient(error=ContentServiceError("down")))

    with pytest.raises(ContentServiceError):
        asyncio.run(repo.list_post_entries())
    with pytest.raises(ContentServiceError):
        asyncio.run(repo.get_post_entry("a"))
