"""Client for the AIVI assistant service: chat messages and audio files."""

import logging
from urllib.parse import quote

from apps.aivi.config.config import ClientConfig
from apps.aivi.models.errors import TransportError
from apps.aivi.models.models import ChatInput, ResponseType, Result
from apps.aivi.transport.http import HttpTransport

logger = logging.getLogger(__name__)


def encode_segment(value: str) -> str:
    """Percent-encode a value as a single URL path segment, dot segments included."""
    if value in (".", ".."):
        return value.replace(".", "%2E")
    return quote(value, safe="")


class RemoteAssistantClient:
    def __init__(self, config, transport=None):
        if isinstance(config, str):
            config = ClientConfig(base_url=config)
        self._config = config
        self._owns_transport = transport is None
        self.transport = transport if transport is not None else HttpTransport(timeout=config.timeout)

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def send_chat_input(self, user_input: str) -> Result:
        """POST the user's message to {base_url}/chat."""
        url = f"{self.base_url}/chat"
        body = ChatInput(user_input=user_input).model_dump()
        try:
            response = await self.transport.post(url, body, timeout=self._config.timeout)
        except TransportError as e:
            logger.error(f"send_chat_input failed for {url}: {e}")
            return Result.failure(e)
        logger.debug(f"Chat input sent to {url}")
        return Result.success(response)

    async def fetch_audio(self, filename: str) -> Result:
        """GET {base_url}/audio/{filename} as raw bytes."""
        url = f"{self.base_url}/audio/{encode_segment(filename)}"
        try:
            response = await self.transport.get(
                url,
                response_type=ResponseType.BINARY,
                timeout=self._config.audio_timeout,
            )
        except TransportError as e:
            logger.error(f"fetch_audio failed for {url}: {e}")
            return Result.failure(e)
        logger.debug(f"Audio fetched from {url}")
        return Result.success(response)

    async def aclose(self):
        # Injected transports belong to the caller
        if self._owns_transport:
            await self.transport.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()
