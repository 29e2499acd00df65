"""GoogleSpeechClient — Google Speech API v2 recognition backend."""
import logging

import httpx

from polyrec.constants import (
    DEFAULT_REQUEST_TIMEOUT,
    MSG_EMPTY_AUDIO,
    MSG_TRANSPORT_STATUS,
    MSG_TRANSPORT_UNDECODABLE,
    MSG_TRANSPORT_UNREACHABLE,
    SPEECH_CONTENT_TYPE,
    SPEECH_ENDPOINT,
    SPEECH_OUTPUT_FORMAT,
)
from polyrec.errors import TransportError
from polyrec.languages import Language
from polyrec.parser import strip_empty_result
from polyrec.recognition.client import RecognitionClient

logger = logging.getLogger(__name__)


class GoogleSpeechClient(RecognitionClient):

    def __init__(
        self,
        endpoint: str = SPEECH_ENDPOINT,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._timeout = timeout
        self._transport = transport

    async def recognize(self, audio: bytes, credential: str, language: Language) -> str:
        if not audio:
            raise ValueError(MSG_EMPTY_AUDIO)

        params = {"lang": language.code, "output": SPEECH_OUTPUT_FORMAT, "key": credential}
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(
                    self._endpoint,
                    params=params,
                    content=audio,
                    headers={"Content-Type": SPEECH_CONTENT_TYPE},
                )
        except httpx.HTTPError as exc:
            raise TransportError(MSG_TRANSPORT_UNREACHABLE % exc) from exc

        if response.is_error:
            detail = response.content.decode("utf-8", errors="ignore")[:200]
            raise TransportError(MSG_TRANSPORT_STATUS % (response.status_code, detail))

        try:
            body = response.content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise TransportError(MSG_TRANSPORT_UNDECODABLE) from exc

        logger.debug("%s: %d bytes received", language.display_name, len(body))
        return strip_empty_result(body)
