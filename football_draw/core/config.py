from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Настройки жеребьевки и окружения.
    app_name: str = "Football Draw"
    seed: int | None = None
    teams_file: str = "example/teams.txt"
    results_file: str | None = None
    output_format: Literal["text", "markup"] = "text"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="DRAW_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )


settings = Settings()
