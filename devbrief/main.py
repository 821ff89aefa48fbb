import asyncio
import contextlib
import logging

import httpx
from telegram.ext import Application, CommandHandler, filters

from devbrief.config import (
    BRIEFING_TIME,
    FEED_URLS,
    FEED_USER_AGENT,
    LOG_LEVEL,
    OLLAMA_API_KEY,
    OLLAMA_HOST,
    OLLAMA_MODEL,
    TELEGRAM_BOT_TOKEN,
    TELEGRAM_CHAT_ID,
)
from devbrief.bot.telegram_handler import handle_error, handle_now
from devbrief.core.generator import ContentGenerator, build_client
from devbrief.integrations.rss_feeds import FeedReader
from devbrief.scheduler.briefing import Briefing
from devbrief.scheduler.daily import run_daily

logger = logging.getLogger(__name__)


async def _start_cron(app: Application):
    briefing = app.bot_data["briefing"]
    app.bot_data["cron"] = asyncio.create_task(run_daily(briefing.send, BRIEFING_TIME))


async def _shutdown(app: Application):
    cron = app.bot_data.get("cron")
    if cron is not None:
        cron.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await cron
    await app.bot_data["http_client"].aclose()
    await app.bot_data["llm_client"].close()


def build_application(token=TELEGRAM_BOT_TOKEN, chat_id=TELEGRAM_CHAT_ID):
    """Create the bot and its long-lived clients, wired into one Briefing."""
    app = (
        Application.builder()
        .token(token)
        .concurrent_updates(True)
        .post_init(_start_cron)
        .post_shutdown(_shutdown)
        .build()
    )

    http_client = httpx.AsyncClient(timeout=None, follow_redirects=True)
    feeds = FeedReader(http_client, FEED_URLS, user_agent=FEED_USER_AGENT)
    llm_client = build_client(OLLAMA_HOST, OLLAMA_API_KEY)
    generator = ContentGenerator(llm_client, OLLAMA_MODEL)

    app.bot_data["http_client"] = http_client
    app.bot_data["llm_client"] = llm_client
    app.bot_data["briefing"] = Briefing(app.bot, chat_id, feeds, generator)

    # new messages only; an edited /now must not start another run
    app.add_handler(CommandHandler("now", handle_now, filters=filters.UpdateType.MESSAGE))
    app.add_error_handler(handle_error)
    return app


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    if not TELEGRAM_BOT_TOKEN:
        logger.error("Set TELEGRAM_BOT_TOKEN in .env")
        return
    if not TELEGRAM_CHAT_ID:
        logger.error("Set TELEGRAM_CHAT_ID in .env")
        return
    if not OLLAMA_API_KEY:
        logger.error("Set OLLAMA_API_KEY in .env")
        return

    logger.info("Starting daily dev briefing bot...")
    logger.info(f"Model: {OLLAMA_MODEL} @ {OLLAMA_HOST}")
    logger.info(f"Chat: {TELEGRAM_CHAT_ID}")
    logger.info(f"Feeds: {len(FEED_URLS)} | daily at {BRIEFING_TIME.strftime('%H:%M')}")

    app = build_application()
    logger.info("Bot is running. Send /now on Telegram for an instant briefing.")
    app.run_polling()


if __name__ == "__main__":
    main()
