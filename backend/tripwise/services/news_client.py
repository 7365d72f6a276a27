"""NewsAPI client — recent safety-relevant articles for a destination."""

import logging
from datetime import date, timedelta

import httpx

from tripwise.config import settings

logger = logging.getLogger(__name__)

QUERY_TERMS = ("safety", "travel", "attack", "disaster", "conflict", "unrest")


def build_query(destination: str) -> str:
    return " OR ".join(f"{destination} {term}" for term in QUERY_TERMS)


class NewsClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = settings.news_api_key if api_key is None else api_key
        self.base_url = base_url or settings.news_base_url
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=settings.news_timeout_seconds,
                transport=self._transport,
            )
        return self._client

    async def search_recent(self, destination: str, today: date | None = None) -> list[dict] | None:
        """Up to ``news_max_articles`` articles from the trailing window.

        Returns None when unconfigured, when the call fails, or when nothing
        was found; callers treat all three as "no signal".
        """
        if not self.is_configured:
            logger.warning("NEWS_API_KEY not configured, skipping news fetch")
            return None

        today = today or date.today()
        params = {
            "q": build_query(destination),
            "from": (today - timedelta(days=settings.news_window_days)).isoformat(),
            "sortBy": "publishedAt",
            "language": "en",
            "apiKey": self.api_key,
        }

        client = await self._get_client()
        try:
            resp = await client.get("/everything", params=params)
            resp.raise_for_status()
            data = resp.json()
            articles = (data.get("articles") if isinstance(data, dict) else None) or []
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"NewsAPI request failed: {e!r}")
            return None

        if not articles:
            return None
        logger.info(f"NewsAPI returned {len(articles)} articles for {destination}")
        return articles[: settings.news_max_articles]

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


news_client = NewsClient()
