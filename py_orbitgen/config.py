"""Configuration management."""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings

# Load .env for local/dev environments only for values missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ}
    for k, v in missing_keys.items():
        if v is not None:
            os.environ[k] = v


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    debug: bool = Field(default=False, description="Enable debug mode")
    allowed_origins: str = Field(
        default="http://localhost:3000", description="CORS allowed origins"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="json", description="Logging format (plain or json)"
    )

    # Generation Configuration
    default_seed: Optional[int] = Field(
        default=None,
        description="Seed used by the API when a request does not give one",
    )
    cosmetic_seed: Optional[int] = Field(
        default=None,
        description="Seed for cosmetic randomness (names, rotation, tidal locking)",
    )

    @property
    def origins(self) -> List[str]:
        """Split the CORS origin string into a list."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    class Config:
        env_prefix = "ORBITGEN_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate singleton settings object
settings = Settings()
