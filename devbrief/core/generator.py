import logging
import time

import ollama

from devbrief.core.prompts import (
    FOCUS_PROMPT,
    INSIGHT_FALLBACK,
    INSIGHT_PROMPT,
    PATTERN_FALLBACK,
    PATTERN_PROMPT,
    TOOL_FALLBACK,
    TOOL_PROMPT,
    TRIVIA_FALLBACK,
    TRIVIA_PROMPT,
)

logger = logging.getLogger(__name__)


def build_client(host, api_key=""):
    """Create the Ollama client. Ollama cloud expects the key as a bearer token."""
    headers = {"Authorization": f"Bearer {api_key}"} if api_key else None
    return ollama.AsyncClient(host=host, headers=headers, timeout=None)


class ContentGenerator:
    """The five short snippets of the daily briefing, one model call each."""

    def __init__(self, client: ollama.AsyncClient, model: str):
        self.client = client
        self.model = model

    async def complete(self, prompt):
        """Send a single user message and return the trimmed reply."""
        start = time.time()
        response = await self.client.chat(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
        )
        latency_ms = int((time.time() - start) * 1000)
        logger.debug(f"[llm] {latency_ms}ms | {prompt[:40]}")
        return response["message"]["content"].strip()

    async def _complete_or(self, prompt, fallback, label):
        try:
            return await self.complete(prompt)
        except Exception as e:
            logger.warning(f"{label} fetch failed: {e!r}")
            return fallback

    async def insight(self):
        return await self._complete_or(INSIGHT_PROMPT, INSIGHT_FALLBACK, "Insight")

    async def focus(self):
        # No fallback, errors reach the caller.
        return await self.complete(FOCUS_PROMPT)

    async def trivia(self):
        return await self._complete_or(TRIVIA_PROMPT, TRIVIA_FALLBACK, "Trivia")

    async def pattern(self):
        return await self._complete_or(PATTERN_PROMPT, PATTERN_FALLBACK, "Architecture")

    async def tool(self):
        return await self._complete_or(TOOL_PROMPT, TOOL_FALLBACK, "Tool")
