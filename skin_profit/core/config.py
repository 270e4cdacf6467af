"""Centralized configuration using pydantic-settings"""

import json
from decimal import Decimal
from pathlib import Path
from typing import Dict, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from skin_profit.core.constants import CONFIG_DIRECTORY, CONFIG_FILENAME
from skin_profit.domain.currency import CURRENCY_RATES, RateTable, validate_rate_table
from skin_profit.domain.models import Currency


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Currency
    default_currency: Currency = Field(
        default=Currency.UAH, description="Sale-side currency preselected in the CLI"
    )
    currency_rates: Dict[Currency, Decimal] = Field(
        default_factory=lambda: dict(CURRENCY_RATES),
        description="Units of each currency per 1 USD",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_format: Literal["json", "text"] = Field(
        default="text", description="Log output format"
    )
    log_dir: Optional[Path] = Field(
        default=None, description="Write rotating log files here when set"
    )

    @field_validator("currency_rates")
    @classmethod
    def validate_currency_rates(cls, v: Dict[Currency, Decimal]) -> Dict[Currency, Decimal]:
        """Reject incomplete tables, non-positive rates and USD != 1"""
        return dict(validate_rate_table(v))

    @classmethod
    def load_from_json(cls, json_path: Path) -> "Settings":
        """Load settings from JSON config file"""
        with open(json_path, encoding="utf-8") as f:
            config_data = json.load(f)

        # Flatten nested JSON structure
        flat_config = {}

        if "currency" in config_data:
            currency = config_data["currency"]
            if "default" in currency:
                flat_config["default_currency"] = currency["default"]
            if "rates" in currency:
                # strings keep the exact decimal value of the snapshot
                flat_config["currency_rates"] = {
                    code: str(rate) for code, rate in currency["rates"].items()
                }

        if "debug" in config_data:
            debug = config_data["debug"]
            flat_config["log_level"] = debug.get("log_level", "INFO")
            flat_config["log_format"] = debug.get("log_format", "text")
            if debug.get("log_dir"):
                flat_config["log_dir"] = Path(debug["log_dir"])

        return cls(**flat_config)

    def rate_table(self) -> RateTable:
        """Read-only copy of the configured rates"""
        return validate_rate_table(self.currency_rates)


# Global settings instance
config_path = Path(__file__).parent.parent.parent / CONFIG_DIRECTORY / CONFIG_FILENAME
try:
    settings = Settings.load_from_json(config_path)
except FileNotFoundError:
    # Fallback to environment variables only
    settings = Settings()
