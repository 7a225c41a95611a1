import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()

DEFAULT_SESSION_SECRET = "secret"


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables.

    Provides validated access to the session cookie settings and the
    runtime environment.
    """

    SESSION_SECRET: str = os.getenv("SESSION_SECRET", DEFAULT_SESSION_SECRET)
    SESSION_COOKIE: str = os.getenv("SESSION_COOKIE", "session")
    SESSION_MAX_AGE: int = int(os.getenv("SESSION_MAX_AGE", str(14 * 24 * 60 * 60)))
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8080"))

    @classmethod
    def is_production(cls) -> bool:
        return cls.ENVIRONMENT == "production"

    @classmethod
    def validate(cls) -> None:
        if not cls.SESSION_SECRET:
            raise ValueError("SESSION_SECRET environment variable is required")
        if cls.is_production() and cls.SESSION_SECRET == DEFAULT_SESSION_SECRET:
            raise ValueError("SESSION_SECRET must be changed from the default in production")
        if cls.SESSION_MAX_AGE <= 0:
            raise ValueError("SESSION_MAX_AGE must be a positive number of seconds")
