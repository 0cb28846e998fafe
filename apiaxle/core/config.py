from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_TIMEOUT_SECONDS, USER_AGENT, VERSION_ENDPOINT


class Settings(BaseSettings):
    # Service
    address: str = Field(default="http://localhost:3000", description="Base address of the ApiAxle API")
    version_endpoint: str = Field(default=VERSION_ENDPOINT, description="Version prefix appended to the address")

    # HTTP
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0, le=600, description="Request timeout in seconds")
    user_agent: str = USER_AGENT

    # Logging
    log_level: str = Field(default="INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    log_json: bool = True

    model_config = SettingsConfigDict(
        env_prefix="APIAXLE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: str) -> str:
        """Address must be an http(s) URL; trailing slashes are dropped"""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"ApiAxle address must start with http:// or https://: {v}")
        return v.rstrip("/")

    @field_validator("version_endpoint")
    @classmethod
    def validate_version_endpoint(cls, v: str) -> str:
        return "/" + v.strip("/") + "/"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Optional[str]) -> str:
        return (v or "INFO").upper()


@lru_cache()
def get_settings() -> Settings:
    """Return the process-wide settings instance (read once from env/.env)"""
    return Settings()
