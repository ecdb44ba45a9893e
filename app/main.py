import logging

from fastapi import Depends, FastAPI

from app.routers import contact, posts
from app.security import get_api_key
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = FastAPI(title="Portfolio API", description="Blog posts and contact form")

app.include_router(posts.router, dependencies=[Depends(get_api_key)])
app.include_router(contact.router)


@app.get("/")
async def root():
    return {"message": "Portfolio API is running"}
