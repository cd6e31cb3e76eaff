from datetime import datetime, timezone
from typing import List

from personal_site.config import Settings
from personal_site.core.db import create_engine, create_session_factory, init_models
from personal_site.db.repositories.entry_repository import EntryRepository
from personal_site.domains.content.entities import Entry, Note, Project


def utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def make_note(slug: str, date: datetime, draft: bool = False, **kwargs) -> Note:
    """Helper to build a Note with sensible defaults."""
    return Note(
        slug=slug,
        title=kwargs.pop("title", slug.replace("-", " ").title()),
        description=kwargs.pop("description", f"About {slug}"),
        date=date,
        draft=draft,
        **kwargs,
    )


def make_project(slug: str, date: datetime, draft: bool = False, **kwargs) -> Project:
    """Helper to build a Project with sensible defaults."""
    return Project(
        slug=slug,
        title=kwargs.pop("title", slug.replace("-", " ").title()),
        description=kwargs.pop("description", f"About {slug}"),
        date=date,
        draft=draft,
        **kwargs,
    )


def sample_entries() -> List[Entry]:
    return [
        make_note("first-note", utc(2023, 3, 10)),
        make_note("draft-note", utc(2024, 6, 1), draft=True),
        make_note("new-year", utc(2024, 1, 5)),
        make_note("late-2023", utc(2023, 11, 20)),
        make_note("latest", utc(2024, 2, 14), body="<p>" + "word " * 450 + "</p>"),
        make_project("site", utc(2024, 1, 20), repo_url="https://github.com/example/site"),
        make_project("old-tool", utc(2022, 7, 1), demo_url="https://tool.example.com"),
        make_project("secret", utc(2024, 5, 1), draft=True),
    ]


async def seed(settings: Settings, entries: List[Entry]) -> None:
    """Write entries into the content store described by settings."""
    engine = create_engine(settings)
    try:
        await init_models(engine)
        async with create_session_factory(engine)() as session:
            repository = EntryRepository(session)
            for entry in entries:
                await repository.create(entry)
    finally:
        await engine.dispose()
