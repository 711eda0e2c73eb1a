from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class NewsArticle:
    id: str
    slug: str
    title: str
    date: date
    author: str
    image_url: str
    data_ai_hint: str
    summary: str
    content: str
