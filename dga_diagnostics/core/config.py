"""
DGA Diagnostics Configuration Settings
"""
import logging
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables
load_dotenv()

class Settings(BaseSettings):
    PROJECT_NAME: str = "DGA Diagnostics"

    # Input handling: "reject" raises InvalidInputError, "clamp" replaces negatives with 0
    NEGATIVE_GAS_POLICY: Literal["reject", "clamp"] = "reject"

    # Duval Pentagon
    PENTAGON_AREA_EPSILON: float = 1e-9

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="DGA_", case_sensitive=True)

settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Set up console logging and the package log level (settings.LOG_LEVEL unless a level is given)."""
    logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    logging.getLogger("dga_diagnostics").setLevel(
        getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)
    )
