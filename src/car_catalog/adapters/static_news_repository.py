from __future__ import annotations

from datetime import date

from car_catalog.domain.news import NewsArticle
from car_catalog.ports.news_repository import NewsRepository

PLACEHOLDER_IMAGE = "https://placehold.co/600x400.png"

ARTICLES: tuple[NewsArticle, ...] = (
    NewsArticle(
        id="1",
        slug="future-of-electric-cars-2025",
        title="The Future of Electric Cars: What to Expect in 2025",
        date=date(2024, 7, 28),
        author="Alex Johnson",
        image_url=PLACEHOLDER_IMAGE,
        data_ai_hint="electric car",
        summary=(
            "Electric vehicles are rapidly evolving. Discover the upcoming trends, "
            "technologies, and models set to hit the market in 2025."
        ),
        content=(
            "<p>Electrification keeps accelerating. Expect longer ranges, faster "
            "charging and a wider spread of body styles, from compact city cars to "
            "heavy-duty trucks, with solid-state batteries promising higher energy "
            "density.</p><p>Charging networks are expanding quickly and falling "
            "battery costs should bring more affordable models to a broader "
            "audience.</p>"
        ),
    ),
    NewsArticle(
        id="2",
        slug="self-driving-trucks-revolution",
        title="Self-Driving Trucks: A Revolution in Logistics",
        date=date(2024, 7, 25),
        author="Sarah Miller",
        image_url=PLACEHOLDER_IMAGE,
        data_ai_hint="truck autonomous",
        summary=(
            "Autonomous trucks are poised to transform the logistics industry, "
            "promising increased efficiency and safety. What are the latest developments?"
        ),
        content=(
            "<p>Driverless trucks combine LiDAR, radar, cameras and GPS with "
            "real-time decision making. Level 4 systems that run unattended on "
            "highways are in extensive testing.</p><p>The rollout will likely be "
            "gradual, with autonomous hub-to-hub highway legs and human drivers "
            "handling the urban miles.</p>"
        ),
    ),
    NewsArticle(
        id="3",
        slug="classic-cars-modern-tech",
        title="Classic Cars Meet Modern Tech: Restomodding Trends",
        date=date(2024, 7, 22),
        author="Chris Davis",
        image_url=PLACEHOLDER_IMAGE,
        data_ai_hint="classic car",
        summary=(
            "Restomodding, the practice of restoring classic cars with modern "
            "technology, is gaining popularity. Explore the coolest trends and innovations."
        ),
        content=(
            "<p>Restomods pair timeless design with modern drivetrains, brakes, "
            "suspension and comfort. Electric conversions are a growing niche.</p>"
            "<p>Interiors get digital gauges styled as analog dials, modern audio "
            "and discreet safety aids, keeping the classic look while making the "
            "car usable every day.</p>"
        ),
    ),
)


class StaticNewsRepository(NewsRepository):
    """Fixed article set. Nothing here is ever written."""

    def __init__(self, articles: tuple[NewsArticle, ...] = ARTICLES) -> None:
        self._articles = tuple(sorted(articles, key=lambda article: article.date, reverse=True))

    def list_articles(self) -> list[NewsArticle]:
        return list(self._articles)

    def get_by_slug(self, slug: str) -> NewsArticle | None:
        return next((article for article in self._articles if article.slug == slug), None)
