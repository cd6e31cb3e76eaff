from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from personal_site.config import Settings
from personal_site.core.dependencies import get_app_settings, get_db
from personal_site.domains.content.schemas import (
    AboutPageResponse, EntrySummary, HomePageResponse, ProjectSummary
)
from personal_site.domains.content.services import ContentService

router = APIRouter(prefix="/api", tags=["pages"])


@router.get("/home", response_model=HomePageResponse)
async def home_page(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings)
):
    """Главная страница: последние заметки и проекты"""
    content_service = ContentService(db)

    notes = await content_service.get_latest_notes(settings.site.num_notes_on_homepage)
    projects = await content_service.get_latest_projects(settings.site.num_projects_on_homepage)

    return HomePageResponse(
        site_name=settings.site.name,
        email=settings.site.email,
        page=settings.home,
        notes=[EntrySummary.from_entry(note) for note in notes],
        projects=[ProjectSummary.from_entry(project) for project in projects],
        socials=list(settings.socials)
    )


@router.get("/about", response_model=AboutPageResponse)
async def about_page(settings: Settings = Depends(get_app_settings)):
    return AboutPageResponse(
        site_name=settings.site.name,
        email=settings.site.email,
        page=settings.about,
        socials=list(settings.socials)
    )
