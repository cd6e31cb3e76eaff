from personal_site.api.http.health import router as health_router
from personal_site.api.http.site import router as site_router
from personal_site.api.http.pages import router as pages_router
from personal_site.api.http.notes import router as notes_router
from personal_site.api.http.projects import router as projects_router

__all__ = [
    "health_router",
    "site_router",
    "pages_router",
    "notes_router",
    "projects_router"
]
