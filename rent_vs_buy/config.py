"""Configuration management using Pydantic Settings"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "rent-vs-buy"
    log_level: str = "INFO"

    # Projection
    recommendation_tolerance: float = Field(default=0.0, ge=0)  # 0 = exact tie only
    max_years: int = Field(default=100, gt=0)  # cap for horizon and amortization

    # Presentation
    currency_symbol: str = "$"


settings = Settings()
