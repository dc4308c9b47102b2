from pathlib import Path
from pydantic_settings import BaseSettings
from typing import Optional

class Settings(BaseSettings):
    # World Generation
    seed: Optional[int] = None  # None seeds from system entropy
    item_find_threshold: float = 0.6  # an item turns up only when the draw exceeds this

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[Path] = "wanderings.log"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

# Get settings instance
settings = Settings()
