"""
Client configuration: an immutable settings value plus loading from the
environment (and a .env file, if present).
"""
import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from docubot.data.enums import ProtocolVersion
from docubot.errors import DocubotConfigError

ENV_API_URL = "DOCUBOT_API_URL"
ENV_API_KEY = "DOCUBOT_API_KEY"
ENV_API_SECRET = "DOCUBOT_API_SECRET"
ENV_PREVIEW_API_URL = "DOCUBOT_PREVIEW_API_URL"
ENV_API_VERSION = "DOCUBOT_API_VERSION"
ENV_REQUESTS_PER_SECOND = "DOCUBOT_REQUESTS_PER_SECOND"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str
    key: str
    secret: str
    preview_url: str | None = None
    version: ProtocolVersion = ProtocolVersion.V3
    requests_per_second: int | None = None

    def __post_init__(self):
        if not self.base_url:
            raise DocubotConfigError("base_url must not be empty")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        preview_url = (self.preview_url or self.base_url).rstrip("/")
        object.__setattr__(self, "preview_url", preview_url)
        object.__setattr__(self, "version", ProtocolVersion.parse(self.version))

    def __repr__(self) -> str:
        return (
            f"ClientConfig(base_url={self.base_url!r}, key={self.key!r}, secret='***', "
            f"preview_url={self.preview_url!r}, version={self.version.name})"
        )


def load_config(dotenv_path: str | None = None) -> ClientConfig:
    """Build a ClientConfig from DOCUBOT_* environment variables."""
    load_dotenv(dotenv_path)

    values = {name: os.getenv(name) for name in (ENV_API_URL, ENV_API_KEY, ENV_API_SECRET)}
    missing = [name for name, value in values.items() if not value]
    if missing:
        for name in missing:
            logging.error(f"Error: {name} not found in environment.")
        raise DocubotConfigError(f"Missing required settings: {', '.join(missing)}")

    rate_raw = os.getenv(ENV_REQUESTS_PER_SECOND)
    try:
        version = ProtocolVersion.parse(os.getenv(ENV_API_VERSION) or ProtocolVersion.V3)
        requests_per_second = int(rate_raw) if rate_raw else None
    except ValueError as e:
        raise DocubotConfigError(str(e)) from e

    return ClientConfig(
        base_url=values[ENV_API_URL],
        key=values[ENV_API_KEY],
        secret=values[ENV_API_SECRET],
        preview_url=os.getenv(ENV_PREVIEW_API_URL) or None,
        version=version,
        requests_per_second=requests_per_second,
    )
