from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from personal_site.config import Settings
from personal_site.core.dependencies import get_app_settings, get_db
from personal_site.domains.content.entities import Collection
from personal_site.domains.content.schemas import (
    ProjectDetail, ProjectSummary, ProjectsPageResponse
)
from personal_site.domains.content.services import ContentService

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("/", response_model=ProjectsPageResponse)
async def get_projects(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings)
):
    """Список проектов"""
    content_service = ContentService(db)
    projects = await content_service.get_all_projects()

    return ProjectsPageResponse(
        page=settings.projects,
        projects=[ProjectSummary.from_entry(project) for project in projects],
        total=len(projects)
    )


@router.get("/{slug}", response_model=ProjectDetail)
async def get_project(slug: str, db: AsyncSession = Depends(get_db)):
    """Получение проекта по slug"""
    content_service = ContentService(db)

    project = await content_service.get_entry(Collection.PROJECTS, slug)

    if not project:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found"
        )

    return ProjectDetail.from_entry(project)
