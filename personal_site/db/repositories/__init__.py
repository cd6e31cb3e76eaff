from personal_site.db.repositories.entry_repository import EntryRepository

__all__ = [
    "EntryRepository",
]
