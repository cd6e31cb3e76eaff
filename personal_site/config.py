from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SiteInfo(BaseModel):
    """Общие сведения о сайте"""
    name: str = "itsdaniel"
    email: str = "hey@itsdaniel.dk"
    num_notes_on_homepage: int = Field(3, ge=0)
    num_projects_on_homepage: int = Field(3, ge=0)

    model_config = ConfigDict(frozen=True)


class PageMetadata(BaseModel):
    """Заголовок и описание страницы"""
    title: str
    description: str

    model_config = ConfigDict(frozen=True)


class Social(BaseModel):
    name: str
    href: str

    model_config = ConfigDict(frozen=True)


class Settings(BaseSettings):
    """Неизменяемая конфигурация приложения, создается один раз при старте"""
    site_url: str = "https://itsdaniel.dk/"
    database_url: str = "sqlite+aiosqlite:///./content.db"
    db_echo: bool = False
    log_level: str = "INFO"

    site: SiteInfo = SiteInfo()
    home: PageMetadata = PageMetadata(
        title="Home",
        description="Daniel Larsen's personal website about software engineering.",
    )
    notes: PageMetadata = PageMetadata(
        title="Notes",
        description="A collection of notes on topics I am passionate about.",
    )
    projects: PageMetadata = PageMetadata(
        title="Projects",
        description="A collection of my projects, with links to repositories and demos.",
    )
    about: PageMetadata = PageMetadata(
        title="About",
        description="Learn more about me and my journey.",
    )
    socials: Tuple[Social, ...] = (
        Social(name="github", href="https://github.com/itsdanieldk/"),
        Social(name="linkedin", href="https://www.linkedin.com/in/itsdanieldk/"),
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PERSONAL_SITE_",
        env_nested_delimiter="__",
        extra="ignore",
        frozen=True,
    )


def get_settings() -> Settings:
    """Чтение конфигурации из окружения (вызывается один раз при старте процесса)"""
    return Settings()
