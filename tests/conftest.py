from datetime import date
from types import SimpleNamespace

import pytest

from devbrief.core.generator import ContentGenerator
from devbrief.core import prompts
from devbrief.scheduler.briefing import Briefing

CHAT_ID = "4242"


class FakeBot:
    def __init__(self, fail=False):
        self.fail = fail
        self.sent = []

    async def send_message(self, chat_id, text, parse_mode=None):
        if self.fail:
            raise RuntimeError("telegram is down")
        self.sent.append(SimpleNamespace(chat_id=chat_id, text=text, parse_mode=parse_mode))


class FakeFeeds:
    def __init__(self, headlines=("T1 - L1", "T2 - L2", "T3 - L3")):
        self._headlines = list(headlines)
        self.calls = 0

    async def headlines(self):
        self.calls += 1
        return list(self._headlines)


class FakeOllama:
    def __init__(self, replies=None, fail=()):
        self.replies = replies or {}
        self.fail = set(fail)

    async def chat(self, model, messages):
        prompt = messages[-1]["content"]
        if prompt in self.fail:
            raise ConnectionError("endpoint unreachable")
        return {"message": {"content": self.replies.get(prompt, f"live: {prompt}")}}


@pytest.fixture
def make_briefing():
    def _make(headlines=("T1 - L1", "T2 - L2", "T3 - L3"), fail=(), replies=None, bot_fails=False):
        generator = ContentGenerator(FakeOllama(replies=replies, fail=fail), "test-model")
        return Briefing(
            FakeBot(fail=bot_fails),
            CHAT_ID,
            FakeFeeds(headlines),
            generator,
            today=lambda: date(2026, 10, 18),
        )

    return _make


@pytest.fixture
def all_prompts():
    return [
        prompts.INSIGHT_PROMPT,
        prompts.FOCUS_PROMPT,
        prompts.TRIVIA_PROMPT,
        prompts.PATTERN_PROMPT,
        prompts.TOOL_PROMPT,
    ]
