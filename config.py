"""Application configuration handled via environment variables."""

# pylint: disable=invalid-name, arguments-differ

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# === Load .env and .env.local (if exists) ===
load_dotenv(dotenv_path=".env")
if Path(".env.local").exists():
    load_dotenv(dotenv_path=".env.local", override=True)

# === Dynamically detect project root ===
PROJECT_ROOT = Path(__file__).resolve().parent


class Config(BaseSettings):  # pylint: disable=too-few-public-methods
    """Settings for the library itself.

    Node variables (``ELIFE_*``) are not held here; :mod:`locations`
    reads them from the environment on every call.
    """

    # === Logging ===
    LOG_DIR: Path = Field(PROJECT_ROOT / "data/logs")
    LOG_LEVEL: str = Field("INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def model_post_init(self, __context):  # type: ignore[override]
        """Expand user home in path settings."""
        self.LOG_DIR = self.LOG_DIR.expanduser()
        self.LOG_LEVEL = self.LOG_LEVEL.strip().upper() or "INFO"


config = Config()
