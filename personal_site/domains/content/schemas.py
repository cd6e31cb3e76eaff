from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from personal_site.config import PageMetadata, Social
from personal_site.domains.content.entities import Collection, Entry, Project
from personal_site.utils.formatting import format_date, reading_time


class EntrySummary(BaseModel):
    """Краткая информация о записи для списков"""
    collection: Collection
    slug: str
    title: str
    description: str
    date: datetime
    formatted_date: str
    link: str

    @classmethod
    def from_entry(cls, entry: Entry) -> "EntrySummary":
        return cls(
            collection=entry.collection,
            slug=entry.slug,
            title=entry.title,
            description=entry.description,
            date=entry.date,
            formatted_date=format_date(entry.date),
            link=entry.link,
        )


class ProjectSummary(EntrySummary):
    demo_url: Optional[str] = None
    repo_url: Optional[str] = None

    @classmethod
    def from_entry(cls, entry: Project) -> "ProjectSummary":
        summary = EntrySummary.from_entry(entry)
        return cls(**summary.model_dump(), demo_url=entry.demo_url, repo_url=entry.repo_url)


class NoteDetail(EntrySummary):
    """Заметка целиком"""
    body: str
    reading_time: str

    @classmethod
    def from_entry(cls, entry: Entry) -> "NoteDetail":
        summary = EntrySummary.from_entry(entry)
        return cls(**summary.model_dump(), body=entry.body, reading_time=reading_time(entry.body))


class ProjectDetail(ProjectSummary):
    """Проект целиком"""
    body: str
    reading_time: str

    @classmethod
    def from_entry(cls, entry: Project) -> "ProjectDetail":
        summary = ProjectSummary.from_entry(entry)
        return cls(**summary.model_dump(), body=entry.body, reading_time=reading_time(entry.body))


class YearGroupResponse(BaseModel):
    year: str
    notes: List[EntrySummary]


class NotesPageResponse(BaseModel):
    """Страница заметок, сгруппированных по годам"""
    page: PageMetadata
    years: List[YearGroupResponse]
    total: int


class ProjectsPageResponse(BaseModel):
    page: PageMetadata
    projects: List[ProjectSummary]
    total: int


class HomePageResponse(BaseModel):
    """Главная страница"""
    site_name: str
    email: str
    page: PageMetadata
    notes: List[EntrySummary]
    projects: List[ProjectSummary]
    socials: List[Social]


class AboutPageResponse(BaseModel):
    site_name: str
    email: str
    page: PageMetadata
    socials: List[Social]
