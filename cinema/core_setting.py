from pathlib import Path
from typing import Annotated, List

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[1]
_ENV_PATH = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_PATH),
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "Cinema Tickets"
    VERSION: str = "0.1.0"
    DEBUG: bool = False

    # Security
    SECRET_KEY: SecretStr = SecretStr("test_secret_key_change_in_production")
    ALLOWED_HOSTS: Annotated[List[str], NoDecode] = ["localhost", "127.0.0.1", "testserver"]

    @field_validator("ALLOWED_HOSTS", mode="before")
    @classmethod
    def assemble_allowed_hosts(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # Logging
    LOG_LEVEL: str = "INFO"

    # Collaborators, as dotted paths to the gateway classes
    PAYMENT_GATEWAY: str = "tickets.gateways.logging_gateway.LoggingTicketPaymentGateway"
    SEAT_RESERVATION_GATEWAY: str = (
        "tickets.gateways.logging_gateway.LoggingSeatReservationGateway"
    )


settings = Settings()
