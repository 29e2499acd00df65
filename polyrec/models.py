"""Wire-format records and per-language recognition outcomes."""
import json
from dataclasses import dataclass, field
from typing import Any, Optional

from polyrec.languages import Language


@dataclass(frozen=True)
class Alternative:
    transcript: str
    confidence: float = 0.0


@dataclass(frozen=True)
class RecognitionResult:
    alternatives: tuple[Alternative, ...] = ()
    final: bool = False


@dataclass(frozen=True)
class ServiceResponse:
    results: tuple[RecognitionResult, ...] = ()
    result_index: int = 0


@dataclass(frozen=True)
class Hypothesis:
    """
    Outcome of one language attempt.

    A hypothesis carrying an error, or no alternative (no speech detected),
    is never eligible to win selection.
    """

    language: Language
    alternative: Optional[Alternative] = None
    error: Optional[Exception] = field(default=None, compare=False)

    @property
    def usable(self) -> bool:
        return self.error is None and self.alternative is not None

    @property
    def transcript(self) -> str:
        return self.alternative.transcript if self.alternative else ""

    @property
    def confidence(self) -> float:
        return self.alternative.confidence if self.alternative else 0.0

    def as_dict(self) -> dict[str, Any]:
        return {
            "text": {"transcript": self.transcript, "confidence": self.confidence},
            "language": self.language.display_name,
        }

    def as_json(self) -> str:
        return json.dumps(self.as_dict(), ensure_ascii=False)
