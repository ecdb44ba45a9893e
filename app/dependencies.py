from fastapi import Depends

from app.db.contentful import get_contentful
from app.repos.posts_repo import ContentfulPostsRepo
from app.services.contact_service import ContactSender
from app.services.posts_service import PostsService
from app.settings import settings


def get_posts_repo(client=Depends(get_contentful)):
    return ContentfulPostsRepo(client)


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo)


def get_contact_sender():
    return ContactSender.from_settings(settings)
