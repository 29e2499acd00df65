"""RecognitionClient — abstract base for speech recognition backends."""
from abc import ABC, abstractmethod

from polyrec.languages import Language


class RecognitionClient(ABC):
    @abstractmethod
    async def recognize(self, audio: bytes, credential: str, language: Language) -> str:
        """Send audio for one language and return the raw response body. Raises TransportError."""
        ...
