"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


class SecuritySettings(BaseModel):
    secret_key: str = Field(default="change-me-in-production", min_length=8)
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)


class GenerationSettings(BaseModel):
    api_key: Optional[str] = None
    endpoint_url: str = "https://api-inference.huggingface.co/models/microsoft/DialoGPT-large"
    max_length: int = Field(default=500, gt=0)
    temperature: float = Field(default=0.8, ge=0)
    repetition_penalty: float = Field(default=1.1, ge=0)
    timeout_seconds: float = Field(default=30.0, gt=0)


class StorageSettings(BaseModel):
    backend: Literal["memory", "sql"] = "memory"
    database_url: str = "sqlite+aiosqlite:///./scriptforge.db"
    echo: bool = False


class CommunitySettings(BaseModel):
    feed_limit: int = Field(default=6, ge=1)
    seed_demo: bool = False


class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "ScriptForge API"
    api_prefix: str = "/api"
    cors_origins: list[str] = ["*"]

    server: ServerSettings = ServerSettings()
    security: SecuritySettings = SecuritySettings()
    generation: GenerationSettings = GenerationSettings()
    storage: StorageSettings = StorageSettings()
    community: CommunitySettings = CommunitySettings()
    logging: LoggingSettings = LoggingSettings()

    # Flat variable names used by earlier deployments.
    jwt_secret: Optional[str] = None
    huggingface_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("huggingface_api_key", "hf_api_key"),
    )

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def secret_key(self) -> str:
        return self.jwt_secret or self.security.secret_key

    @property
    def algorithm(self) -> str:
        return self.security.algorithm

    @property
    def access_token_expire_minutes(self) -> int:
        return self.security.access_token_expire_minutes

    @property
    def generation_api_key(self) -> Optional[str]:
        key = self.generation.api_key or self.huggingface_api_key
        if key is None or not key.strip():
            return None
        return key.strip()


@lru_cache()
def get_settings() -> Settings:
    return Settings()
