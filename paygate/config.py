from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Payment log sink
    LOG_FILE_PATH: str = "payment.log"
    LOG_LEVEL: str = "INFO"

    # Simulated processor latency: each call sleeps 1, 2 or 3 units
    LATENCY_UNIT_SECONDS: float = 1.0

    # Seed for the per-processor random generators (None = OS entropy)
    RANDOM_SEED: Optional[int] = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
