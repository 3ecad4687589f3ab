from apps.aivi.client.aivi import RemoteAssistantClient
from apps.aivi.config.config import ClientConfig
from apps.aivi.config.log import setup_logging
from apps.aivi.models.errors import AIVIError, DecodeError, NetworkError, ServerError, TransportError
from apps.aivi.models.models import ChatInput, ResponseType, Result
from apps.aivi.transport.http import HttpTransport, make_httpx_client

__all__ = [
    "AIVIError",
    "ChatInput",
    "ClientConfig",
    "DecodeError",
    "HttpTransport",
    "NetworkError",
    "RemoteAssistantClient",
    "ResponseType",
    "Result",
    "ServerError",
    "TransportError",
    "make_httpx_client",
    "setup_logging",
]
