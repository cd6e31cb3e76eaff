import logging
from datetime import timezone
from itertools import chain
from typing import Iterable, List, Tuple
from urllib.parse import urljoin

from feedgen.feed import FeedGenerator
from sqlalchemy.ext.asyncio import AsyncSession

from personal_site.config import Settings
from personal_site.domains.content.entities import Entry
from personal_site.domains.content.services import ContentService, sort_by_date_desc
from personal_site.domains.feed.entities import FeedItem, FeedMetadata

logger = logging.getLogger(__name__)


def to_feed_item(entry: Entry) -> FeedItem:
    return FeedItem(
        title=entry.title,
        description=entry.description,
        pub_date=entry.date,
        link=entry.link,
    )


def assemble_feed_items(*sequences: Iterable[Entry]) -> List[FeedItem]:
    """Объединение коллекций в одну ленту по убыванию даты.

    Каждая коллекция отсортирована отдельно, поэтому объединение
    сортируется заново целиком.
    """
    entries = sort_by_date_desc(chain.from_iterable(sequences))
    return [to_feed_item(entry) for entry in entries]


def render_rss(metadata: FeedMetadata, items: Iterable[FeedItem]) -> bytes:
    """Сериализация ленты в RSS 2.0"""
    fg = FeedGenerator()
    fg.title(metadata.title)
    fg.description(metadata.description)
    fg.link(href=metadata.site, rel="alternate")
    fg.language("en")

    for item in items:
        url = urljoin(metadata.site, item.link)
        pub_date = item.pub_date
        if pub_date.tzinfo is None:
            pub_date = pub_date.replace(tzinfo=timezone.utc)

        fe = fg.add_entry(order="append")
        fe.title(item.title)
        if item.description:
            fe.description(item.description)
        fe.link(href=url)
        fe.guid(url, permalink=True)
        fe.pubDate(pub_date)

    return fg.rss_str(pretty=True)


class FeedService:
    """Сервис сборки общей ленты сайта"""

    def __init__(self, session: AsyncSession, settings: Settings):
        self.settings = settings
        self.content_service = ContentService(session)

    def get_metadata(self) -> FeedMetadata:
        return FeedMetadata(
            title=self.settings.home.title,
            description=self.settings.home.description,
            site=self.settings.site_url,
        )

    async def build_feed(self) -> Tuple[FeedMetadata, List[FeedItem]]:
        """Заметки и проекты в одной ленте"""
        notes = await self.content_service.get_all_notes()
        projects = await self.content_service.get_all_projects()

        items = assemble_feed_items(notes, projects)
        logger.debug(f"Assembled feed with {len(items)} items")

        return self.get_metadata(), items

    async def render(self) -> bytes:
        metadata, items = await self.build_feed()
        return render_rss(metadata, items)
