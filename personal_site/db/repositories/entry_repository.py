from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from personal_site.db.models.entry import ContentEntry as ContentEntryModel
from personal_site.domains.content.entities import ENTRY_TYPES, Collection, Entry


def to_utc(value: datetime) -> datetime:
    """Дата в UTC; SQLite хранит время без часового пояса"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class EntryRepository:
    """Репозиторий для чтения записей из хранилища контента"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def fetch(self, collection: Collection) -> List[Entry]:
        """Все записи коллекции, включая черновики, в порядке хранилища"""
        result = await self.session.execute(
            select(ContentEntryModel)
            .where(ContentEntryModel.collection == collection)
            .order_by(ContentEntryModel.id)
        )
        return [self._to_domain(row) for row in result.scalars().all()]

    async def get_by_slug(self, collection: Collection, slug: str) -> Optional[Entry]:
        """Получение записи по slug"""
        result = await self.session.execute(
            select(ContentEntryModel).where(
                ContentEntryModel.collection == collection,
                ContentEntryModel.slug == slug,
            )
        )
        db_entry = result.scalar_one_or_none()
        return self._to_domain(db_entry) if db_entry else None

    async def create(self, entry: Entry) -> Entry:
        """Добавление записи в хранилище"""
        demo_url = repo_url = None
        if entry.collection == Collection.PROJECTS:
            demo_url, repo_url = entry.demo_url, entry.repo_url

        db_entry = ContentEntryModel(
            collection=entry.collection,
            slug=entry.slug,
            title=entry.title,
            description=entry.description,
            date=to_utc(entry.date),
            draft=entry.draft,
            body=entry.body,
            demo_url=demo_url,
            repo_url=repo_url,
        )

        self.session.add(db_entry)
        try:
            await self.session.commit()
            await self.session.refresh(db_entry)
            return self._to_domain(db_entry)
        except IntegrityError:
            await self.session.rollback()
            raise ValueError(f"Entry {entry.collection.value}/{entry.slug} already exists")

    def _to_domain(self, db_entry: ContentEntryModel) -> Entry:
        """Преобразование модели БД в доменную сущность"""
        collection = Collection(db_entry.collection)
        common = dict(
            slug=db_entry.slug,
            title=db_entry.title,
            description=db_entry.description or "",
            date=to_utc(db_entry.date),
            draft=bool(db_entry.draft),
            body=db_entry.body or "",
        )
        if collection == Collection.PROJECTS:
            common.update(demo_url=db_entry.demo_url, repo_url=db_entry.repo_url)
        return ENTRY_TYPES[collection](**common)
