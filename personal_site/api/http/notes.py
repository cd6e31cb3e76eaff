from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from personal_site.config import Settings
from personal_site.core.dependencies import get_app_settings, get_db
from personal_site.domains.content.entities import Collection
from personal_site.domains.content.schemas import (
    EntrySummary, NoteDetail, NotesPageResponse, YearGroupResponse
)
from personal_site.domains.content.services import ContentService

router = APIRouter(prefix="/api/notes", tags=["notes"])


@router.get("/", response_model=NotesPageResponse)
async def get_notes(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings)
):
    """Заметки, сгруппированные по годам"""
    content_service = ContentService(db)
    groups = await content_service.get_notes_by_year()

    years = [
        YearGroupResponse(
            year=year,
            notes=[EntrySummary.from_entry(note) for note in notes]
        )
        for year, notes in groups.items()
    ]

    return NotesPageResponse(
        page=settings.notes,
        years=years,
        total=sum(len(group.notes) for group in years)
    )


@router.get("/{slug}", response_model=NoteDetail)
async def get_note(slug: str, db: AsyncSession = Depends(get_db)):
    """Получение заметки по slug"""
    content_service = ContentService(db)

    note = await content_service.get_entry(Collection.NOTES, slug)

    if not note:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Note not found"
        )

    return NoteDetail.from_entry(note)
