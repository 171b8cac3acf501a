# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration: all env-driven, zero hardcode.
Single source of truth for every tunable parameter.
"""

import os


class Settings:
    """Application settings loaded from environment variables.

    Values are read when the object is built, so tests can set env vars
    and construct a fresh ``Settings()``.
    """

    def __init__(self) -> None:
        self.SERVICE_NAME: str = os.getenv("SERVICE_NAME", "volunteer-board")
        self.SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
        self.SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "8000"))

        self.DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./volunteers.db")
        self.DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "10"))
        self.DB_MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "5"))
        self.DB_POOL_RECYCLE: int = int(os.getenv("DB_POOL_RECYCLE", "300"))

        # Empty means every admin request is refused.
        self.ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD", "")

        self.RAMADAN_START: str = os.getenv("RAMADAN_START", "2026-02-19")
        self.RAMADAN_END: str = os.getenv("RAMADAN_END", "2026-03-20")
        self.HIJRI_ANCHOR: str = os.getenv("HIJRI_ANCHOR", self.RAMADAN_START)
        self.HIJRI_YEAR: int = int(os.getenv("HIJRI_YEAR", "1447"))
        self.DAY_CAPACITY: int = int(os.getenv("DAY_CAPACITY", "3"))

        self.CACHE_MAX_AGE_SECONDS: int = int(os.getenv("CACHE_MAX_AGE_SECONDS", "30"))
        self.CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
