"""
output.py

PURPOSE: Tagged reply lines produced by the engine.
DEPENDENCIES: None (pure Python + dataclasses)

ARCHITECTURE NOTES:
The engine never formats text for a terminal. It produces an ordered list
of lines, each tagged with a style the presentation layer understands:
- PLAIN: ordinary narration (empty text means a paragraph break)
- SUCCESS: a completed item, e.g. a ticked checklist row
- PAUSE: the reader should get a moment before the next block

Handlers and events collect lines in an ActionResult and merge the results
of whatever they delegate to.
"""

from dataclasses import dataclass, field
from enum import Enum, auto


class LineStyle(Enum):
    """How a line should be presented."""

    PLAIN = auto()
    SUCCESS = auto()
    PAUSE = auto()


@dataclass(frozen=True)
class Line:
    """A single line of output."""

    text: str
    style: LineStyle = LineStyle.PLAIN


@dataclass
class ActionResult:
    """Lines produced while executing an action."""

    lines: list[Line] = field(default_factory=list)

    def say(self, text: str, style: LineStyle = LineStyle.PLAIN) -> "ActionResult":
        """Append a single line."""
        self.lines.append(Line(text, style))
        return self

    def blank(self) -> "ActionResult":
        """Append a paragraph break."""
        return self.say("")

    def reply(self, text: str) -> "ActionResult":
        """Append a response to the player's command, followed by a break."""
        return self.say(text).blank()

    def pause(self) -> "ActionResult":
        """Append a pause marker."""
        return self.say("", LineStyle.PAUSE)

    def extend(self, other: "ActionResult") -> "ActionResult":
        """Append all lines of another result."""
        self.lines.extend(other.lines)
        return self

    @property
    def messages(self) -> list[str]:
        """Non-empty line texts, in order."""
        return [line.text for line in self.lines if line.text]

    @property
    def message(self) -> str:
        """All non-empty text joined into one string."""
        return "\n".join(self.messages)
