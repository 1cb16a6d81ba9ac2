# hanztravel/config.py
from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # App
    APP_ENV: Literal["dev", "prod", "staging"] = "dev"
    TZ: str = "UTC"
    CURRENCY: Literal["USD"] = "USD"

    # Catalog (built-in tables are used when no JSON file is given)
    CATALOG_PATH: Optional[str] = None

    # Default selections for new sessions
    DEFAULT_ORIGIN: str = "JFK"
    DEFAULT_DESTINATION: str = "LHR"
    DEFAULT_AIRLINE: str = "American Airlines"
    DEFAULT_AIRCRAFT: str = "Boeing 737-800"

    # Sessions
    SESSION_TTL_SECONDS: int = 1800  # 30 minutes per interactive visit

    # PayPal
    PAYPAL_CLIENT_ID: str = "sb"
    PAYPAL_CLIENT_SECRET: str = ""
    PAYPAL_ENV: Literal["sandbox", "live"] = "sandbox"
    PAYMENT_BREAKER_THRESHOLD: int = 5
    PAYMENT_BREAKER_RECOVERY: int = 60

    # values come from the environment, then .env; keys this app doesn't define are ignored
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

settings = Settings()
