"""
Backend settings, read from the environment (and a local .env file).

    NOTEBOOK_LAYOUTS_PROFILE   retrieval profile name (default, deterministic)
    NOTEBOOK_LAYOUTS_CATALOG   optional JSON catalog; starter patterns otherwise
    MAX_UPLOAD_BYTES           overlay upload cap
    CORS_ORIGINS               comma-separated list
    LOG_LEVEL                  stdlib logging level name
"""

import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from notebook_layouts.config import PROFILES

load_dotenv()

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:3000"


class Settings(BaseModel):
    profile: str = "default"
    catalog_path: Optional[str] = None
    max_upload_bytes: int = Field(default=10 * 1024 * 1024, gt=0)
    cors_origins: List[str] = Field(default_factory=list)
    log_level: str = "INFO"

    @field_validator("profile")
    @classmethod
    def _known_profile(cls, v: str) -> str:
        if v not in PROFILES:
            raise ValueError(f"Unknown profile '{v}'. Available: {list(PROFILES)}")
        return v

    @field_validator("log_level")
    @classmethod
    def _upper(cls, v: str) -> str:
        return v.upper()


def get_settings() -> Settings:
    origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return Settings(
        profile=os.getenv("NOTEBOOK_LAYOUTS_PROFILE", "default"),
        catalog_path=os.getenv("NOTEBOOK_LAYOUTS_CATALOG") or None,
        max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024))),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
