"""GNews search adapter."""
import logging
from typing import Optional

from cityboard.adapters.base import ProviderAdapter, require_text
from cityboard.errors import UpstreamUnavailable
from cityboard.models.news import Article, NewsBundle

logger = logging.getLogger(__name__)

MAX_ARTICLES = 5
LANGUAGE = "en"


class NewsAdapter(ProviderAdapter):
    """Searches recent English-language articles mentioning a city."""

    api_key_env = "NEWS_API_KEY"
    unavailable_message = "Failed to fetch news data"

    def __init__(self, *args, max_articles: int = MAX_ARTICLES, language: str = LANGUAGE, **kwargs):
        super().__init__(*args, **kwargs)
        self.max_articles = max_articles
        self.language = language

    async def fetch(self, city: Optional[str]) -> NewsBundle:
        """Return up to max_articles articles for the city.

        All provider failures, including rejected queries, surface as
        UpstreamUnavailable.
        """
        city = require_text(city, "Missing required query parameter: city")
        api_key = self._require_api_key()

        response = await self._get(
            f"{self.base_url}/search",
            params={"q": city, "lang": self.language, "max": self.max_articles, "token": api_key},
        )
        data = self._json(response)
        if response.status_code != 200 or not isinstance(data, dict):
            logger.error("News provider error %s: %s", response.status_code, self._redact(response.text))
            raise UpstreamUnavailable(self.unavailable_message)

        articles = []
        for item in (data.get("articles") or [])[: self.max_articles]:
            try:
                articles.append(self._to_article(item))
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                # Skip malformed rows
                logger.warning("Skipping malformed article: %s", e)
                continue

        return NewsBundle(city=city, total=len(articles), articles=articles)

    @staticmethod
    def _to_article(item: dict) -> Article:
        source = item.get("source") or {}
        return Article(
            title=item["title"],
            description=item.get("description"),
            url=item["url"],
            source=source.get("name") if isinstance(source, dict) else None,
            published_at=item.get("publishedAt"),
        )
