"""TDD: GoogleSpeechClient tests written FIRST"""
import httpx
import pytest

from polyrec.errors import TransportError
from polyrec.languages import Language
from polyrec.recognition.client import RecognitionClient
from polyrec.recognition.google import GoogleSpeechClient

BODY = '{"result":[{"alternative":[{"transcript":"hi","confidence":0.9}],"final":true}],"result_index":0}'


def make_client(handler) -> GoogleSpeechClient:
    return GoogleSpeechClient("https://speech.test/recognize", transport=httpx.MockTransport(handler))


def test_google_client_implements_abc():
    assert issubclass(GoogleSpeechClient, RecognitionClient)


async def test_recognize_posts_audio_with_language_and_key():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text=BODY)

    result = await make_client(handler).recognize(b"\x01\x02", "secret", Language.GREEK)

    assert result == BODY
    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/recognize"
    assert request.url.params["lang"] == "el"
    assert request.url.params["output"] == "json"
    assert request.url.params["key"] == "secret"
    assert request.headers["Content-Type"] == "audio/l16; rate=16000;"
    assert request.content == b"\x01\x02"


async def test_recognize_strips_empty_result_prefix():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text='{"result":[]}\n' + BODY)

    assert await make_client(handler).recognize(b"audio", "k", Language.ENGLISH) == BODY


async def test_recognize_keeps_lone_empty_result():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text='{"result":[]}')

    assert await make_client(handler).recognize(b"audio", "k", Language.ENGLISH) == '{"result":[]}'


async def test_recognize_wraps_connection_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(TransportError, match="could not reach"):
        await make_client(handler).recognize(b"audio", "k", Language.ENGLISH)


async def test_recognize_wraps_timeouts():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(TransportError):
        await make_client(handler).recognize(b"audio", "k", Language.ENGLISH)


async def test_recognize_rejects_error_status():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, text="forbidden")

    with pytest.raises(TransportError, match="403"):
        await make_client(handler).recognize(b"audio", "k", Language.ENGLISH)


async def test_recognize_rejects_undecodable_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"\xff\xfe\xfd")

    with pytest.raises(TransportError, match="UTF-8"):
        await make_client(handler).recognize(b"audio", "k", Language.ENGLISH)


async def test_recognize_rejects_empty_audio():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    with pytest.raises(ValueError):
        await make_client(handler).recognize(b"", "k", Language.ENGLISH)
