from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from tilearea.utils.units import Unit


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TILEAREA_")

    app_name: str = "Tile Area Calculator"
    debug: bool = True
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 0  # 0 picks a free port at launch
    open_browser: bool = True
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    default_unit: Unit = Unit.CM  # unit for newly added entries
    default_contingency_percent: int = 15
    max_contingency_percent: int = 50
    display_fraction_digits: int = 4
    max_entries: int = 200


settings = Settings()
