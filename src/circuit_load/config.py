"""Runtime configuration for circuit-load."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="CIRCUIT_LOAD_", env_file=".env", extra="ignore")

    app_name: str = "circuit-load"
    log_level: str = "WARNING"
    default_voltage: float = Field(default=120, gt=0, description="Voltage used when a new circuit omits one.")
    default_breaker_rating: float = Field(
        default=15,
        gt=0,
        description="Breaker rating in amps used when a new circuit omits one.",
    )
    seed_demo_circuit: bool = True


settings = Settings()
