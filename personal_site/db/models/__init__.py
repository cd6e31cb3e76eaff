from personal_site.db.models.entry import ContentEntry

__all__ = [
    "ContentEntry",
]
