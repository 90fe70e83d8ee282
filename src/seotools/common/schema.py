"""Dataclasses for generation requests, results and retry policy."""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Union

FALLBACK_TEXT = "No response generated."

@dataclass(frozen=True)
class GenerationRequest:
    """One text-generation call: the user prompt plus its system instruction."""
    user_prompt: str
    system_instruction: str

    def to_payload(self) -> dict:
        """Body for the generateContent endpoint."""
        return {
            "contents": [{"parts": [{"text": self.user_prompt}]}],
            "systemInstruction": {"parts": [{"text": self.system_instruction}]},
        }


class FailureKind(str, Enum):
    CLIENT_ERROR = "client_error"
    RETRIES_EXHAUSTED = "retries_exhausted"


@dataclass(frozen=True)
class Success:
    text: str
    ok = True

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str
    ok = False

    def render(self) -> str:
        """Inline form shown in place of a result."""
        return f"Error: {self.message}"


GenerationResult = Union[Success, Failure]


@dataclass(frozen=True)
class RetryPolicy:
    """Backoff delays in milliseconds; one retry per delay."""
    delays_ms: tuple[int, ...] = (1000, 2000, 4000, 8000, 16000)

    @property
    def max_attempts(self) -> int:
        return len(self.delays_ms) + 1
