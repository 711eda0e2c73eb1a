import datetime

from pydantic import BaseModel


class NewsSummaryDTO(BaseModel):
    id: str
    slug: str
    title: str
    date: datetime.date
    author: str
    image_url: str
    data_ai_hint: str
    summary: str


class NewsArticleDTO(NewsSummaryDTO):
    content: str


class NewsListResponseDTO(BaseModel):
    articles: list[NewsSummaryDTO]
