import enum
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Dict, List, Optional, Union


class Collection(str, enum.Enum):
    """Коллекции контента; значение совпадает с сегментом URL"""
    NOTES = "notes"
    PROJECTS = "projects"


@dataclass(frozen=True)
class ContentEntry:
    """Общая форма опубликованной записи"""
    slug: str
    title: str
    description: str
    date: datetime
    draft: bool = False
    body: str = ""

    collection: ClassVar[Collection]

    @property
    def link(self) -> str:
        """Путь записи на сайте"""
        return f"/{self.collection.value}/{self.slug}/"

    @property
    def year(self) -> str:
        return str(self.date.year)


@dataclass(frozen=True)
class Note(ContentEntry):
    """Заметка из коллекции notes"""
    collection: ClassVar[Collection] = Collection.NOTES


@dataclass(frozen=True)
class Project(ContentEntry):
    """Проект из коллекции projects"""
    demo_url: Optional[str] = None
    repo_url: Optional[str] = None

    collection: ClassVar[Collection] = Collection.PROJECTS


Entry = Union[Note, Project]

# Год (четыре цифры) -> заметки этого года в порядке исходной последовательности
YearGroup = Dict[str, List[Note]]

ENTRY_TYPES = {
    Collection.NOTES: Note,
    Collection.PROJECTS: Project,
}
