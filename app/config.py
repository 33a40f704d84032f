import logging
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    APP_ENV: str = "development"
    DATABASE_URL: str = "sqlite:///./data/assetverse.db"
    CLIENT_URL: str = "http://localhost:5173"
    STRIPE_SECRET: str = ""
    CHECKOUT_CURRENCY: str = "usd"
    CORS_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()

if not settings.STRIPE_SECRET:
    if settings.APP_ENV == "production":
        raise RuntimeError("STRIPE_SECRET must be set in production. Check your .env file.")
    else:
        logger.warning("STRIPE_SECRET is not set; checkout endpoints will fail until it is configured")
