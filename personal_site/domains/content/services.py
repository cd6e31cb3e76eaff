import logging
from typing import Iterable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from personal_site.db.repositories.entry_repository import EntryRepository
from personal_site.domains.content.entities import Collection, Entry, Note, Project, YearGroup

logger = logging.getLogger(__name__)


def sort_by_date_desc(entries: Iterable[Entry]) -> List[Entry]:
    """Стабильная сортировка по убыванию даты"""
    return sorted(entries, key=lambda entry: entry.date, reverse=True)


def published(entries: Iterable[Entry]) -> List[Entry]:
    """Без черновиков, новые первыми"""
    return sort_by_date_desc(entry for entry in entries if not entry.draft)


def group_notes_by_year(notes: Iterable[Note]) -> YearGroup:
    """Группировка уже отсортированных заметок по году публикации"""
    groups: YearGroup = {}
    for note in notes:
        groups.setdefault(note.year, []).append(note)
    return groups


class ContentService:
    """Сервис для чтения коллекций контента"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.entry_repository = EntryRepository(session)

    async def get_collection(self, collection: Collection) -> List[Entry]:
        """Опубликованные записи коллекции, отсортированные по убыванию даты"""
        entries = await self.entry_repository.fetch(collection)
        result = published(entries)
        logger.debug(f"Fetched {len(entries)} entries from {collection.value}, {len(result)} published")
        return result

    async def get_all_notes(self) -> List[Note]:
        return await self.get_collection(Collection.NOTES)

    async def get_all_projects(self) -> List[Project]:
        return await self.get_collection(Collection.PROJECTS)

    async def get_latest_notes(self, limit: int) -> List[Note]:
        """Последние заметки для главной страницы"""
        return (await self.get_all_notes())[:limit]

    async def get_latest_projects(self, limit: int) -> List[Project]:
        """Последние проекты для главной страницы"""
        return (await self.get_all_projects())[:limit]

    async def get_notes_by_year(self) -> YearGroup:
        return group_notes_by_year(await self.get_all_notes())

    async def get_entry(self, collection: Collection, slug: str) -> Optional[Entry]:
        """Опубликованная запись по slug; черновики не отдаются"""
        entry = await self.entry_repository.get_by_slug(collection, slug)

        if not entry or entry.draft:
            return None

        return entry
