"""Compose the daily briefing message.

Output uses Telegram's legacy Markdown: ``*bold*`` and ``_italic_``.
"""

from dataclasses import dataclass
from datetime import date


def format_date_label(day: date) -> str:
    """``Saturday, October 18``: weekday, month and unpadded day."""
    return f"{day.strftime('%A, %B')} {day.day}"


@dataclass(frozen=True)
class DigestMessage:
    date_label: str
    headlines: tuple
    insight: str
    focus: str
    trivia: str
    pattern: str
    tool: str

    def render(self) -> str:
        sections = [
            f"📅 *{self.date_label}* – Daily Dev Briefing",
            "📰 *Tech Headlines:*\n- " + "\n- ".join(self.headlines),
            f"🧠 *Insight of the Day:*\n_{self.insight}_",
            f"🎯 *Focus Suggestion:*\n{self.focus}",
            f"🧩 *Fun Dev Trivia:*\n{self.trivia}",
            f"🏛️ *Architecture Pattern:*\n{self.pattern}",
            f"🔧 *Tool You Should Know:*\n{self.tool}",
        ]
        return "\n\n".join(sections)


def compose_digest(headlines, insight, focus, trivia, pattern, tool, today: date) -> str:
    message = DigestMessage(
        date_label=format_date_label(today),
        headlines=tuple(headlines),
        insight=insight,
        focus=focus,
        trivia=trivia,
        pattern=pattern,
        tool=tool,
    )
    return message.render()
