"""Dispatcher — races one recognition attempt per language and keeps the most confident."""
import asyncio
import logging
from collections.abc import Sequence

from polyrec.constants import (
    DEFAULT_LISTEN_TIMEOUT,
    MSG_ATTEMPT_CRASHED,
    MSG_ATTEMPT_FAILED,
    MSG_BEST,
    MSG_DEADLINE,
    MSG_HYPOTHESIS,
    MSG_LISTEN_START,
    MSG_NO_RESULT,
    MSG_NO_SPEECH,
)
from polyrec.errors import NoResultError, RecognitionError
from polyrec.languages import SUPPORTED_LANGUAGES, Language
from polyrec.models import Hypothesis
from polyrec.parser import parse
from polyrec.recognition.client import RecognitionClient
from polyrec.recognition.google import GoogleSpeechClient

logger = logging.getLogger(__name__)


# ── pure helpers (module-level so tests can import them directly) ──────────────


def pick_best(best: Hypothesis | None, candidate: Hypothesis) -> Hypothesis | None:
    """Keep `best` unless `candidate` is usable and strictly more confident."""
    match (best, candidate.usable):
        case (_, False):
            return best
        case (None, True):
            return candidate
        case _ if best.confidence < candidate.confidence:
            return candidate
        case _:
            return best


# ── dispatcher ────────────────────────────────────────────────────────────────


class Dispatcher:
    """Fans audio out to every language at once and collects results until a deadline."""

    def __init__(
        self,
        client: RecognitionClient,
        languages: Sequence[Language] = SUPPORTED_LANGUAGES,
        timeout: float = DEFAULT_LISTEN_TIMEOUT,
    ) -> None:
        self._client = client
        self._languages = tuple(languages)
        self._timeout = timeout

    @property
    def languages(self) -> tuple[Language, ...]:
        return self._languages

    async def listen(self, audio: bytes, credential: str) -> Hypothesis:
        """Return the most confident usable hypothesis. Raises NoResultError."""
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self._timeout
        queue: asyncio.Queue[Hypothesis] = asyncio.Queue()

        logger.info(MSG_LISTEN_START, len(self._languages), self._timeout)
        tasks = [
            asyncio.create_task(self._attempt(audio, credential, lang, queue))
            for lang in self._languages
        ]
        try:
            best = await self._collect(queue, len(tasks), deadline)
        finally:
            await _abandon(tasks)

        match best:
            case None:
                raise NoResultError(MSG_NO_RESULT)
            case winner:
                logger.info(MSG_BEST, winner.language, winner.transcript, winner.confidence)
                return winner

    async def _attempt(
        self,
        audio: bytes,
        credential: str,
        language: Language,
        queue: asyncio.Queue[Hypothesis],
    ) -> None:
        try:
            body = await self._client.recognize(audio, credential, language)
            alternative = parse(body)
        except (RecognitionError, ValueError) as exc:
            logger.warning(MSG_ATTEMPT_FAILED, language, exc)
            hypothesis = Hypothesis(language=language, error=exc)
        except Exception as exc:
            logger.exception(MSG_ATTEMPT_CRASHED, language)
            hypothesis = Hypothesis(language=language, error=exc)
        else:
            match alternative:
                case None:
                    logger.debug(MSG_NO_SPEECH, language)
                case alt:
                    logger.debug(MSG_HYPOTHESIS, language, alt.transcript, alt.confidence)
            hypothesis = Hypothesis(language=language, alternative=alternative)
        queue.put_nowait(hypothesis)

    async def _collect(
        self,
        queue: asyncio.Queue[Hypothesis],
        expected: int,
        deadline: float,
    ) -> Hypothesis | None:
        loop = asyncio.get_running_loop()
        best: Hypothesis | None = None
        for received in range(expected):
            remaining = deadline - loop.time()
            match remaining > 0:
                case True:
                    try:
                        hypothesis = await asyncio.wait_for(queue.get(), timeout=remaining)
                    except asyncio.TimeoutError:
                        hypothesis = None
                case False:
                    hypothesis = None
            if hypothesis is None:
                logger.warning(MSG_DEADLINE, received, expected)
                break
            best = pick_best(best, hypothesis)
        return best


async def _abandon(tasks: list[asyncio.Task]) -> None:
    """Cancel attempts still in flight and wait for them to unwind."""
    pending = [task for task in tasks if not task.done()]
    list(map(lambda task: task.cancel(), pending))
    await asyncio.gather(*pending, return_exceptions=True)


async def listen(
    audio: bytes,
    credential: str,
    *,
    client: RecognitionClient | None = None,
    languages: Sequence[Language] = SUPPORTED_LANGUAGES,
    timeout: float = DEFAULT_LISTEN_TIMEOUT,
) -> Hypothesis:
    """Recognize `audio` in every language and return the most confident hypothesis."""
    dispatcher = Dispatcher(client or GoogleSpeechClient(), languages=languages, timeout=timeout)
    return await dispatcher.listen(audio, credential)
