import math
import re
from datetime import date

WORDS_PER_MINUTE = 200

TAG_RE = re.compile(r"<[^>]+>")
ENTITY_RE = re.compile(r"&[#a-z0-9]+;", re.IGNORECASE)

# Не зависит от локали процесса
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_date(value: date) -> str:
    """Дата в виде "Jan 05, 2024" """
    month = MONTH_ABBREVIATIONS[value.month - 1]
    return f"{month} {value.day:02d}, {value.year:04d}"


def count_words(html: str) -> int:
    """Количество слов в HTML без тегов и сущностей"""
    text_only = ENTITY_RE.sub(" ", TAG_RE.sub("", html))
    return len([word for word in text_only.split() if word])


def reading_time(html: str) -> str:
    """Оценка времени чтения при 200 словах в минуту, не меньше одной минуты"""
    minutes = math.ceil(count_words(html) / WORDS_PER_MINUTE)

    if minutes <= 1:
        return "1 min read"

    return f"{minutes} min read"
