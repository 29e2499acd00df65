"""Response parser — decodes recognition service JSON into wire records."""
import json
from typing import Any

from polyrec.constants import EMPTY_RESULT_PREFIX, MSG_DECODE_JSON, MSG_DECODE_SCHEMA
from polyrec.errors import DecodeError
from polyrec.models import Alternative, RecognitionResult, ServiceResponse


def strip_empty_result(body: str) -> str:
    """Drop the service's leading empty-result line, if present."""
    return body.removeprefix(EMPTY_RESULT_PREFIX)


def _to_alternative(raw: dict[str, Any]) -> Alternative:
    return Alternative(
        transcript=str(raw["transcript"]),
        confidence=float(raw.get("confidence", 0.0)),
    )


def _to_result(raw: dict[str, Any]) -> RecognitionResult:
    return RecognitionResult(
        alternatives=tuple(map(_to_alternative, raw.get("alternative", []))),
        final=bool(raw.get("final", False)),
    )


def decode_response(body: str) -> ServiceResponse:
    try:
        data = json.loads(strip_empty_result(body))
    except json.JSONDecodeError as exc:
        raise DecodeError(MSG_DECODE_JSON % exc) from exc

    try:
        return ServiceResponse(
            results=tuple(map(_to_result, data.get("result", []))),
            result_index=int(data.get("result_index", 0)),
        )
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise DecodeError(MSG_DECODE_SCHEMA % exc) from exc


def top_alternative(response: ServiceResponse) -> Alternative | None:
    """First alternative of the first result; the service orders them by confidence."""
    match response.results:
        case (first, *_) if first.alternatives:
            return first.alternatives[0]
        case _:
            return None


def parse(body: str) -> Alternative | None:
    """Return the top alternative, or None when the service heard no speech."""
    return top_alternative(decode_response(body))
