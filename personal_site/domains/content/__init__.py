from personal_site.domains.content.entities import (
    Collection, ContentEntry, Note, Project, Entry, YearGroup
)
from personal_site.domains.content.schemas import (
    EntrySummary, ProjectSummary, NoteDetail, ProjectDetail, YearGroupResponse,
    NotesPageResponse, ProjectsPageResponse, HomePageResponse, AboutPageResponse
)

__all__ = [
    "Collection", "ContentEntry", "Note", "Project", "Entry", "YearGroup",
    "EntrySummary", "ProjectSummary", "NoteDetail", "ProjectDetail", "YearGroupResponse",
    "NotesPageResponse", "ProjectsPageResponse", "HomePageResponse", "AboutPageResponse",
]
