from typing import Optional

from app.db.contentful import ContentfulClient
from app.settings import settings


class ContentfulPostsRepo:
    def __init__(self, client: ContentfulClient, content_type: Optional[str] = None):
        self.client = client
        self.content_type = content_type or settings.BLOG_CONTENT_TYPE

    async def list_post_entries(self) -> dict:
        return await self.client.get_entries(
            {
                "content_type": self.content_type,
                "order": "-fields.publishDate",
            }
        )

    async def get_post_entry(self, slug: str) -> Optional[dict]:
        result = await self.client.get_entries(
            {
                "content_type": self.content_type,
                "fields.slug": slug,
                "limit": 1,
            }
        )
        items = result.get("items") or []
        return items[0] if items else None
