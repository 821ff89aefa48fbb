import asyncio
import logging
from datetime import datetime, timedelta

logger = logging.getLogger(__name__)

# Longest single sleep. The wall clock is re-read after each one, so fires
# stay on local time across DST changes.
MAX_SLEEP_SECONDS = 3600


def next_run_after(now, at):
    """Next datetime strictly after ``now`` whose wall-clock time is ``at``."""
    target = now.replace(hour=at.hour, minute=at.minute, second=0, microsecond=0)
    if target <= now:
        target += timedelta(days=1)
    return target


async def run_daily(job, at, now=datetime.now, sleep=asyncio.sleep):
    """Await ``job()`` once a day at local time ``at``, forever.

    Fires missed while the process was down are not replayed.
    """
    while True:
        current = now()
        target = next_run_after(current, at)
        logger.info(f"[cron] next briefing at {target.strftime('%a %I:%M %p')} "
                    f"({int((target - current).total_seconds())}s)")

        while current < target:
            await sleep(min((target - current).total_seconds(), MAX_SLEEP_SECONDS))
            current = now()

        logger.info("[cron] running scheduled briefing")
        try:
            await job()
        except Exception:
            logger.exception("[cron] scheduled briefing failed")
