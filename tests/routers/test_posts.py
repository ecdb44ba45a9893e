from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from app import dependencies as deps
from app.routers import posts
from app.schemas.blog import BlogPostDetail, BlogPostSummary, PostList
from app.services.results import Err, ErrorKind, Ok
from tests.conftest import FakePostsService, block, make_document, text


def make_app(fake_service: FakePostsService):
    app = FastAPI()
    app.dependency_overrides[deps.get_posts_service] = lambda: fake_service
    app.include_router(posts.router)
    return app


def test_list_posts_returns_posts_and_total():
    post_list = PostList(
        posts=[
            BlogPostSummary(title="Second", slug="second", publishDate="2024-02-01"),
            BlogPostSummary(title="First", slug="first", publishDate="2024-01-01"),
        ],
        total=7,
    )
    client = TestClient(make_app(FakePostsService(fetch_posts_return=Ok(post_list))))

    res = client.get("/posts")

    assert res.status_code == 200
    body = res.json()
    assert [p["slug"] for p in body["posts"]] == ["second", "first"]
    assert body["total"] == 7
    assert body["posts"][0]["tags"] == []
    assert body["posts"][0]["excerpt"] == ""


def test_list_posts_returns_empty_list_when_no_posts():
    client = TestClient(make_app(FakePostsService(fetch_posts_return=Ok(PostList()))))

    res = client.get("/posts")

    assert res.status_code == 200
    assert res.json() == {"posts": [], "total": 0}


def test_list_posts_returns_503_on_service_failure():
    service = FakePostsService(fetch_posts_return=Err(ErrorKind.SERVICE_FAILURE, "down"))
    client = TestClient(make_app(service))

    res = client.get("/posts")

    assert res.status_code == 503
    assert res.json()["detail"] == "Content service unavailable"


def test_list_posts_passes_through_http_exception():
    class BoomService(FakePostsService):
        async def fetch_posts(self):
            raise HTTPException(status_code=418, detail="teapot")

    client = TestClient(make_app(BoomService()))

    res = client.get("/posts")
    assert res.status_code == 418
    assert res.json()["detail"] == "teapot"


def test_list_posts_returns_500_on_unexpected_error():
    class BoomService(FakePostsService):
        async def fetch_posts(self):
            raise RuntimeError("boom")

    client = TestClient(make_app(BoomService()))

    res = client.get("/posts")
    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to retrieve posts"


def test_get_post_renders_article_html():
    detail = BlogPostDetail(
        title="Hello",
        slug="hello",
        publishDate="2024-01-01",
        content=make_document(
            block("paragraph", text("Hi "), block("hyperlink", text("there"), uri="https://x.io")),
        ),
    )
    service = FakePostsService(fetch_post_return=Ok(detail))
    client = TestClient(make_app(service))

    res = client.get("/posts/hello")

    assert res.status_code == 200
    body = res.json()
    assert body["slug"] == "hello"
    assert body["content"]["nodeType"] == "document"
    assert body["contentHtml"].startswith('<p class="mb-4">Hi <a href="https://x.io"')
    assert 'rel="noopener noreferrer"' in body["contentHtml"]
    assert service.requested_slugs == ["hello"]


def test_get_post_without_content_has_empty_html():
    detail = BlogPostDetail(title="Empty", slug="empty")
    client = TestClient(make_app(FakePostsService(fetch_post_return=Ok(detail))))

    res = client.get("/posts/empty")

    assert res.status_code == 200
    assert res.json()["contentHtml"] == ""


def test_get_post_returns_404_when_missing():
    service = FakePostsService(fetch_post_return=Err(ErrorKind.NOT_FOUND))
    client = TestClient(make_app(service))

    res = client.get("/posts/missing")
    assert res.status_code == 404
    assert res.json()["detail"] == "Post not found"


def test_get_post_returns_503_on_service_failure():
    service = FakePostsService(fetch_post_return=Err(ErrorKind.SERVICE_FAILURE))
    client = TestClient(make_app(service))

    res = client.get("/posts/any")
    assert res.status_code == 503


def test_get_post_returns_500_on_unexpected_error():
    class BoomService(FakePostsService):
        async def fetch_post(self, slug: str):
            raise RuntimeError("boom")

    client = TestClient(make_app(BoomService()))

    res = client.get("/posts/any")
    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to retrieve post"
