from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings as _BaseSettings

from ordering import __version__


class _Settings(_BaseSettings):

    DEPLOYMENT_ENVIRONMENT: Literal["local", "dev", "prod"] = "local"

    API_VERSION: str = __version__

    LOG_LEVEL: str = "INFO"

    CHECKOUT_DELAY_SECONDS: float = Field(default=0.0, ge=0)

    INVENTORY: dict[str, int] = Field(default_factory=dict)


settings = _Settings()
