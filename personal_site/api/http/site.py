from urllib.parse import urljoin

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from personal_site.config import Settings
from personal_site.core.dependencies import get_app_settings, get_db
from personal_site.domains.feed.services import FeedService

router = APIRouter(tags=["site"])


def build_robots_txt(site_url: str) -> str:
    """Текст robots.txt со ссылкой на карту сайта"""
    sitemap_url = urljoin(site_url, "sitemap-index.xml")
    return f"User-agent: *\nAllow: /\n\nSitemap: {sitemap_url}"


@router.get("/robots.txt", response_class=PlainTextResponse)
async def robots_txt(settings: Settings = Depends(get_app_settings)):
    return PlainTextResponse(build_robots_txt(settings.site_url))


@router.get("/rss.xml")
@router.get("/feed.xml")
async def rss_feed(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings)
):
    """Общая RSS-лента заметок и проектов"""
    feed_service = FeedService(db, settings)
    content = await feed_service.render()
    return Response(content=content, media_type="application/xml")
