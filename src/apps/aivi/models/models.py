from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from apps.aivi.models.errors import TransportError


class ChatInput(BaseModel):
    user_input: str


class ResponseType(str, Enum):
    JSON = "json"
    BINARY = "binary"  # raw bytes, e.g. audio files


class Result(BaseModel):
    """
    Outcome of a single request.
    Holds either the transport response or the TransportError that replaced it.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    value: Any = None
    error: Optional[TransportError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self):
        if self.error is not None:
            raise self.error
        return self.value

    @classmethod
    def success(cls, value):
        return cls(value=value)

    @classmethod
    def failure(cls, error: TransportError):
        return cls(error=error)
