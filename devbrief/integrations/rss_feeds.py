"""Fetch the newest item from each configured RSS/Atom feed."""

import asyncio
import logging
from dataclasses import dataclass

import feedparser
import httpx

logger = logging.getLogger(__name__)

MAX_HEADLINES = 3


@dataclass(frozen=True)
class FeedItem:
    title: str
    link: str

    def format(self):
        return f"{self.title} - {self.link}"


class FeedReader:
    """Reads the first entry of every feed, skipping feeds that fail."""

    def __init__(self, client: httpx.AsyncClient, urls, user_agent="Mozilla/5.0", limit=MAX_HEADLINES):
        self.client = client
        self.urls = list(urls)
        self.user_agent = user_agent
        self.limit = limit

    async def fetch_first_item(self, url):
        """Return the newest item of one feed, or None if it can't be read."""
        try:
            response = await self.client.get(url, headers={"User-Agent": self.user_agent})
            response.raise_for_status()
        except Exception as e:
            logger.warning(f"Failed to fetch {url}: {e!r}")
            return None

        parsed = feedparser.parse(response.content)
        if not parsed.entries:
            if parsed.bozo:
                logger.warning(f"Failed to parse {url}: {parsed.get('bozo_exception')!r}")
            else:
                logger.debug(f"No items in {url}")
            return None

        entry = parsed.entries[0]
        return FeedItem(title=entry.get("title", ""), link=entry.get("link", ""))

    async def headlines(self):
        """Formatted ``"<title> - <link>"`` strings, in URL order."""
        items = await asyncio.gather(*(self.fetch_first_item(url) for url in self.urls))
        found = [item for item in items if item is not None]
        logger.info(f"[feeds] {len(found)}/{len(self.urls)} feeds returned an item")
        return [item.format() for item in found[:self.limit]]
