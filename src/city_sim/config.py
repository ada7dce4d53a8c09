"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables (prefix ``CITY_SIM_``)."""

    model_config = SettingsConfigDict(
        env_prefix="CITY_SIM_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    database_url: str = "sqlite+aiosqlite:///./city_sim.db"

    # Simulation edition: "extended" (parks, plazas, schools, player bonus)
    # or "classic" (parks only, money ledger)
    profile: str = "extended"
    seed: int | None = None

    # Auto-stepping
    tick_interval_seconds: float = 0.35
    autorun_on_start: bool = False

    # Canvas LMS to-do integration
    canvas_base_url: str = "https://canvas.ucsc.edu"
    canvas_timeout_seconds: float = 30.0

    # Logging
    log_level: str = "info"


settings = Settings()
