"""
Application configuration loaded from environment variables.

Uses pydantic-settings for type-safe env var parsing with automatic
.env file loading. The dataset itself is static: by default the bundled
seed table in fencemap/data/divisions.py is served, and DATASET_PATH can
point at a JSON file with the same row shape to replace it.

To extend: add new fields here and document them in the README / .env.
See https://docs.pydantic.dev/latest/concepts/pydantic_settings/
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ─── Core ──────────────────────────────────────────────────────
    environment: str = "development"
    debug: bool = False

    # ─── CORS ──────────────────────────────────────────────────────
    # Comma-separated allowed origins. The Vite dev server runs on 5173.
    cors_origins_str: str = "http://localhost:5173,http://localhost:3000"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins_str.split(",") if o.strip()]

    # ─── Dataset ───────────────────────────────────────────────────
    # Optional JSON file: a list of {"name", "members", "Foil_A", ...} rows.
    # Empty → the bundled seed table is used.
    dataset_path: Optional[str] = None

    # ─── Side panel ────────────────────────────────────────────────
    # Width (px) of the detail panel; it hides that much of the map
    # while open, and how long its exit animation runs.
    panel_width: int = 420
    panel_animation_ms: int = 300

    # ─── Rate limiting ─────────────────────────────────────────────
    export_rate_limit: str = "10/minute"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Don't fail on unknown env vars
    )


# Module-level singleton — import this everywhere instead of instantiating Settings()
settings = Settings()
