"""Configuration loaded from environment variables."""

import os
from datetime import datetime

from dotenv import load_dotenv

load_dotenv()


def parse_briefing_time(value):
    """Parse an ``HH:MM`` string into a ``datetime.time``."""
    return datetime.strptime(value.strip(), "%H:%M").time()


def parse_feed_urls(value):
    return [url.strip() for url in value.split(",") if url.strip()]


# Telegram
TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN", "")
TELEGRAM_CHAT_ID = os.getenv("TELEGRAM_CHAT_ID", "").strip()

# LLM
OLLAMA_HOST = os.getenv("OLLAMA_HOST", "https://ollama.com")
OLLAMA_MODEL = os.getenv("OLLAMA_MODEL", "gpt-oss:120b")
OLLAMA_API_KEY = os.getenv("OLLAMA_API_KEY", "")

# Feeds
DEFAULT_FEED_URLS = [
    "https://techcrunch.com/feed/",
    "https://www.theverge.com/rss/index.xml",
    "https://hnrss.org/frontpage",
]
FEED_URLS = parse_feed_urls(os.getenv("FEED_URLS", "")) or DEFAULT_FEED_URLS
FEED_USER_AGENT = os.getenv("FEED_USER_AGENT", "Mozilla/5.0")

# Agent
BRIEFING_TIME = parse_briefing_time(os.getenv("BRIEFING_TIME", "08:00"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
