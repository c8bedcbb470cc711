"""Runtime settings, read from ``DEPMAP_*`` environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	"""Environment variables use the DEPMAP_ prefix, e.g. DEPMAP_MAX_WORKERS."""

	model_config = SettingsConfigDict(env_prefix="DEPMAP_")

	max_workers: int = Field(default=8, ge=1)
	minify: bool = True
