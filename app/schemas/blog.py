from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class FeaturedImage(BaseModel):
    url: str
    title: Optional[str] = None


class AuthorPicture(BaseModel):
    url: str


class Author(BaseModel):
    name: str
    picture: Optional[AuthorPicture] = None


class BlogPostSummary(BaseModel):
    title: str
    slug: str
    featuredImage: Optional[FeaturedImage] = None
    excerpt: str = ""
    publishDate: Optional[str] = None
    author: Optional[Author] = None
    tags: List[str] = Field(default_factory=list)
    readingTime: Optional[str] = None


class BlogPostDetail(BlogPostSummary):
    content: Optional[Dict[str, Any]] = None


class BlogPostArticle(BlogPostDetail):
    contentHtml: str = ""


class PostList(BaseModel):
    posts: List[BlogPostSummary] = Field(default_factory=list)
    total: int = 0
