"""Entry point — wires Config → GoogleSpeechClient → Dispatcher for one audio file."""
import argparse
import asyncio
import logging
from pathlib import Path

from rich.logging import RichHandler

from polyrec.config import Config
from polyrec.constants import MSG_READ_AUDIO_FAILED
from polyrec.dispatcher import Dispatcher
from polyrec.errors import NoResultError
from polyrec.recognition.google import GoogleSpeechClient

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def read_audio_file(path: Path) -> bytes:
    """Load raw 16 kHz L16 audio from disk."""
    return path.read_bytes()


def build_dispatcher(config: Config) -> Dispatcher:
    client = GoogleSpeechClient(config.speech_endpoint, timeout=config.request_timeout)
    return Dispatcher(client, languages=config.languages, timeout=config.listen_timeout)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Recognize speech in every supported language.")
    parser.add_argument("audio", type=Path, help="Raw 16 kHz L16 audio file.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    config = Config.from_env()
    _setup_logging("DEBUG" if args.verbose else config.log_level)

    try:
        audio = read_audio_file(args.audio)
    except OSError as exc:
        logger.error(MSG_READ_AUDIO_FAILED, args.audio, exc)
        raise SystemExit(1) from exc

    dispatcher = build_dispatcher(config)
    try:
        best = asyncio.run(dispatcher.listen(audio, config.speech_api_key))
    except NoResultError as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc

    print(best.as_json())


if __name__ == "__main__":
    main()
