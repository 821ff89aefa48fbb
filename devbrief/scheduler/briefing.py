"""The daily briefing pipeline: fetch, generate, compose, send.

Triggered daily by the scheduler or on demand by ``/now``. Only one run is
in flight at a time; a trigger that arrives while a run is in progress is
dropped.
"""

import asyncio
import logging
import time
from datetime import date

from telegram.constants import ParseMode

from devbrief.core.digest import compose_digest

logger = logging.getLogger(__name__)


class Briefing:
    def __init__(self, bot, chat_id, feeds, generator, today=date.today):
        self.bot = bot
        self.chat_id = str(chat_id)
        self.feeds = feeds
        self.generator = generator
        self.today = today
        self.running = False

    def is_authorized(self, chat_id):
        return str(chat_id) == self.chat_id

    async def build(self):
        """Gather every source concurrently and compose the message.

        A failed focus suggestion propagates; every other source falls back.
        """
        news, insight, focus, trivia, pattern, tool = await asyncio.gather(
            self.feeds.headlines(),
            self.generator.insight(),
            self.generator.focus(),
            self.generator.trivia(),
            self.generator.pattern(),
            self.generator.tool(),
        )
        return compose_digest(news, insight, focus, trivia, pattern, tool, self.today())

    async def send(self, trigger="scheduled"):
        """Run the pipeline once. Returns True if a message was delivered."""
        if self.running:
            logger.warning(f"[{trigger}] briefing already running, skipping")
            return False

        self.running = True
        t0 = time.time()
        try:
            try:
                message = await self.build()
            except Exception:
                logger.exception(f"[{trigger}] failed to build daily message")
                return False

            try:
                await self.bot.send_message(
                    chat_id=self.chat_id,
                    text=message,
                    parse_mode=ParseMode.MARKDOWN,
                )
            except Exception:
                logger.exception(f"[{trigger}] failed to send daily message")
                return False

            logger.info(f"[{trigger}] message sent in {(time.time() - t0) * 1000:.0f}ms")
            return True
        finally:
            self.running = False
