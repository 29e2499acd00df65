from dataclasses import dataclass
import os
from dotenv import load_dotenv

from polyrec.constants import DEFAULT_LISTEN_TIMEOUT, DEFAULT_REQUEST_TIMEOUT, SPEECH_ENDPOINT
from polyrec.languages import SUPPORTED_LANGUAGES, Language


@dataclass(frozen=True)
class Config:
    speech_api_key: str
    speech_endpoint: str
    listen_timeout: float
    request_timeout: float
    languages: tuple[Language, ...]
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        api_key = os.getenv("SPEECH_API_KEY")
        endpoint = os.getenv("SPEECH_ENDPOINT") or SPEECH_ENDPOINT
        listen_timeout = os.getenv("LISTEN_TIMEOUT", str(DEFAULT_LISTEN_TIMEOUT))
        request_timeout = os.getenv("REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT))
        raw_languages = os.getenv("LISTEN_LANGUAGES", "")
        log_level = os.getenv("LOG_LEVEL", "INFO")

        codes = tuple(c.strip() for c in raw_languages.split(",") if c.strip())
        languages = tuple(map(Language.from_code, codes)) or SUPPORTED_LANGUAGES

        return cls._validate(
            speech_api_key=api_key,
            speech_endpoint=endpoint,
            listen_timeout=float(listen_timeout),
            request_timeout=float(request_timeout),
            languages=languages,
            log_level=log_level,
        )

    @staticmethod
    def _validate(
        speech_api_key: str | None,
        speech_endpoint: str,
        listen_timeout: float,
        request_timeout: float,
        languages: tuple[Language, ...],
        log_level: str,
    ) -> "Config":
        match speech_api_key:
            case None | "":
                raise ValueError("SPEECH_API_KEY must be set in .env")
            case _:
                pass

        match listen_timeout:
            case t if t <= 0:
                raise ValueError("LISTEN_TIMEOUT must be positive")
            case _:
                pass

        return Config(
            speech_api_key=speech_api_key,
            speech_endpoint=speech_endpoint,
            listen_timeout=listen_timeout,
            request_timeout=request_timeout,
            languages=languages,
            log_level=log_level,
        )
