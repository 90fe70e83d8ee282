"""Word, character, paragraph and reading-time statistics."""
from __future__ import annotations
import math
import re
from dataclasses import asdict, dataclass

WORDS_PER_MINUTE = 200

_WHITESPACE = re.compile(r"\s+")
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")

@dataclass(frozen=True)
class TextStats:
    words: int
    chars: int
    chars_no_space: int
    paragraphs: int
    read_time_minutes: int

    @property
    def read_time(self) -> str:
        return f"{self.read_time_minutes} min"

    def as_dict(self) -> dict[str, int | str]:
        return {**asdict(self), "read_time": self.read_time}

def count(text: str) -> TextStats:
    trimmed = text.strip()
    words = len(_WHITESPACE.split(trimmed)) if trimmed else 0
    paragraphs = len(_PARAGRAPH_BREAK.split(trimmed)) if trimmed else 0
    return TextStats(
        words=words,
        chars=len(text),
        chars_no_space=len(_WHITESPACE.sub("", text)),
        paragraphs=paragraphs,
        read_time_minutes=math.ceil(words / WORDS_PER_MINUTE),
    )
