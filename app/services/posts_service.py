import logging
from datetime import datetime, timezone
from typing import List, Optional

from app.db.contentful import ContentServiceError
from app.repos.posts_repo import ContentfulPostsRepo
from app.schemas.blog import BlogPostDetail, BlogPostSummary, PostList
from app.services.post_mapper import map_post_detail, map_post_summary
from app.services.results import Err, ErrorKind, Ok, Result
from app.utils import parse_publish_date

logger = logging.getLogger(__name__)

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


class PostsService:
    def __init__(self, repo: ContentfulPostsRepo, scheme: Optional[str] = None):
        self.repo = repo
        self.scheme = scheme

    async def fetch_posts(self) -> Result[PostList]:
        try:
            result = await self.repo.list_post_entries()
        except ContentServiceError as e:
            logger.error(f"Error fetching blog posts from Contentful: {e}")
            return Err(ErrorKind.SERVICE_FAILURE, str(e))

        posts = sort_by_publish_date(
            map_post_summary(item, scheme=self.scheme)
            for item in result.get("items") or []
        )
        total = result.get("total")
        return Ok(PostList(posts=posts, total=total if total is not None else len(posts)))

    async def get_posts(self) -> PostList:
        """Posts list, or an empty list when the content service is unreachable."""
        result = await self.fetch_posts()
        if isinstance(result, Ok):
            return result.value
        return PostList(posts=[], total=0)

    async def fetch_post(self, slug: str) -> Result[BlogPostDetail]:
        try:
            entry = await self.repo.get_post_entry(slug)
        except ContentServiceError as e:
            logger.error(f"Error fetching blog post {slug} from Contentful: {e}")
            return Err(ErrorKind.SERVICE_FAILURE, str(e))

        if entry is None:
            return Err(ErrorKind.NOT_FOUND, f"No post with slug {slug!r}")
        return Ok(map_post_detail(entry, scheme=self.scheme))

    async def get_post_by_slug(self, slug: str) -> Optional[BlogPostDetail]:
        result = await self.fetch_post(slug)
        return result.value if isinstance(result, Ok) else None


def sort_by_publish_date(posts) -> List[BlogPostSummary]:
    """Newest first; posts without a parseable date keep their order at the end."""

    def key(post: BlogPostSummary):
        published = parse_publish_date(post.publishDate)
        return (published is not None, published or _OLDEST)

    return sorted(posts, key=key, reverse=True)
