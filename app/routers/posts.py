import logging

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.schemas.blog import BlogPostArticle, PostList
from app.services.posts_service import PostsService
from app.services.results import Err, ErrorKind
from app.services.rich_text_renderer import ARTICLE_RULES, render_document

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=PostList)
async def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """
    Get all posts, newest first.
    Requires X-Portfolio-Key; the site front end holds the key server-side.
    """
    try:
        result = await service.fetch_posts()
        if isinstance(result, Err):
            raise HTTPException(status_code=503, detail="Content service unavailable")
        return result.value
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=BlogPostArticle)
async def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """
    Get a single post by slug, with its body rendered to HTML.
    Requires X-Portfolio-Key, held by the site front end like /posts.
    """
    try:
        result = await service.fetch_post(slug)
        if isinstance(result, Err):
            if result.kind is ErrorKind.NOT_FOUND:
                raise HTTPException(status_code=404, detail="Post not found")
            raise HTTPException(status_code=503, detail="Content service unavailable")

        post = result.value
        return BlogPostArticle(
            **post.model_dump(),
            contentHtml=render_document(post.content, ARTICLE_RULES),
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
