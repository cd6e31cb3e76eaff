from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class FeedMetadata:
    """Метаданные ленты"""
    title: str
    description: str
    site: str


@dataclass(frozen=True)
class FeedItem:
    """Элемент ленты: ровно четыре поля"""
    title: str
    description: str
    pub_date: datetime
    link: str
