from sqlalchemy import Boolean, Column, DateTime, Enum, String, Text, UniqueConstraint

from personal_site.db.base import BaseModel
from personal_site.domains.content.entities import Collection


class ContentEntry(BaseModel):
    __tablename__ = "content_entries"
    __table_args__ = (
        UniqueConstraint("collection", "slug", name="uq_content_entries_collection_slug"),
    )

    collection = Column(
        Enum(Collection, name="collection", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        index=True,
    )
    slug = Column(String(255), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, default="")
    date = Column(DateTime(timezone=True), nullable=False)
    draft = Column(Boolean, default=False, nullable=False)
    body = Column(Text, default="")

    # Только для проектов
    demo_url = Column(String(2048), nullable=True)
    repo_url = Column(String(2048), nullable=True)
