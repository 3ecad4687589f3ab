from environs import Env
from pydantic import BaseModel, ConfigDict, field_validator

env = Env()
env.read_env()


class ClientConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_url: str
    timeout: float = 30.0
    audio_timeout: float = 60.0  # audio downloads are slower than chat replies

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_env(cls):
        """Build a config from AIVI_* environment variables (a .env file is honored)."""
        return cls(
            base_url=env.str("AIVI_BASE_URL"),
            timeout=env.float("AIVI_TIMEOUT", 30.0),
            audio_timeout=env.float("AIVI_AUDIO_TIMEOUT", 60.0),
        )
