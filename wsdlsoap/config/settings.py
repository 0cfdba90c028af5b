from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    SOAP client settings using Pydantic BaseSettings.
    Loaded automatically from environment variables and an optional .env file.
    """

    # HTTP transport
    SOAP_TIMEOUT: float = Field(30.0, description="Timeout in seconds for WSDL retrieval and SOAP calls")
    SOAP_VERIFY_TLS: bool = Field(True, description="Verify TLS certificates of HTTPS endpoints")
    SOAP_USER_AGENT: str = Field("wsdlsoap/0.1.0", description="User-Agent sent with every request")

    # Envelope
    SOAP_ENVELOPE_VERSION: Literal["1.1", "1.2"] = Field(
        "1.1", description="SOAP envelope namespace used for outgoing requests"
    )

    # Logging
    LOG_LEVEL: str = Field("INFO", description="Log level for the wsdlsoap logger")
    LOG_FORMAT: Literal["json", "plain"] = Field("plain", description="Console log format")
    LOG_FILE: str | None = Field(None, description="Optional file receiving JSON logs")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("SOAP_TIMEOUT")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("SOAP_TIMEOUT must be greater than 0")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got {v!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
