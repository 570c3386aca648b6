"""
Configuration settings management with environment variable support.
"""

import json
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv


# Load environment variables
load_dotenv()


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Backend API
    api_url: str = "http://localhost:4000"
    timeout: int = 30

    # Web server
    app_name: str = "ChooJobs"
    secret_key: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = 5001
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Billing: Paystack amounts are in the smallest currency unit
    pro_plan_amount: int = 5000
    free_monthly_analyses: int = 5

    export_formats: List[str] = Field(default_factory=lambda: ["pdf", "docx"])

    @classmethod
    def from_json(cls, config_path: str = "config.json") -> "Settings":
        """
        Load settings from JSON configuration file.

        Environment variables still fill any field the file leaves out.

        Args:
            config_path: Path to JSON configuration file

        Returns:
            Settings instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        try:
            with open(config_path, 'r') as f:
                config_data = json.load(f)

            return cls(**config_data)

        except FileNotFoundError:
            raise FileNotFoundError(
                f"❌ Config file not found: {config_path}\n"
                "   Create it or configure the app through environment variables"
            )
        except json.JSONDecodeError as e:
            raise ValueError(f"❌ Invalid JSON in config file: {e}")
        except ValidationError as e:
            raise ValueError(f"❌ Invalid configuration: {e}")

    @property
    def api_base_url(self) -> str:
        """API URL without a trailing slash."""
        return self.api_url.rstrip("/")


@lru_cache()
def get_settings(config_path: Optional[str] = None) -> Settings:
    """
    Get cached settings instance.

    Args:
        config_path: Optional JSON configuration file; environment only when omitted

    Returns:
        Settings instance (cached)
    """
    if config_path:
        return Settings.from_json(config_path)
    return Settings()
