"""
Configuration settings for Totes
"""
import os
from pathlib import Path
from typing import List

import dotenv
from pydantic_settings import BaseSettings

# Resolve .env paths relative to this file so settings load regardless of cwd.
_CONFIG_DIR = Path(__file__).resolve().parent.parent  # backend/
_TOTES_ROOT = _CONFIG_DIR.parent                       # totes/
_ENV_CANDIDATES = [
    _CONFIG_DIR / ".env",
    _TOTES_ROOT / ".env",
]
_ENV_FILE = [str(p) for p in _ENV_CANDIDATES if p.is_file()]

# Load .env into os.environ so the os.getenv defaults below see it too.
for _p in _ENV_CANDIDATES:
    if _p.is_file():
        dotenv.load_dotenv(_p, override=False)
        break


class Settings(BaseSettings):
    """Application settings"""

    # App
    APP_NAME: str = "Totes"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")
    DB_USER: str = os.getenv("DB_USER", "postgres")
    DB_PASSWORD: str = os.getenv("DB_PASSWORD", "")
    DB_HOST: str = os.getenv("DB_HOST", "localhost")
    DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
    DB_NAME: str = os.getenv("DB_NAME", "totes")

    @property
    def database_connection_string(self) -> str:
        """Build database connection string"""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def is_sqlite(self) -> bool:
        return self.database_connection_string.startswith("sqlite")

    # CORS - comma-separated
    CORS_ORIGINS: str = os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000",
    )

    @property
    def cors_origins_list(self) -> List[str]:
        origins = [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]
        return list(dict.fromkeys(origins))

    # Security
    SECRET_KEY: str = os.getenv("SECRET_KEY", "change-me-in-production")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "720"))
    BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "12"))

    # First administrator, created at startup only when the users table is empty
    ADMIN_EMAIL: str = os.getenv("ADMIN_EMAIL", "admin@example.com")
    ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD", "")

    # Billing
    ENTERPRISE_DATA: str = os.getenv("ENTERPRISE_DATA", "Totes S.A.S.")

    # Appointments: hourly slots from FIRST_HOUR:00 to LAST_HOUR:00 (inclusive)
    APPOINTMENT_FIRST_HOUR: int = int(os.getenv("APPOINTMENT_FIRST_HOUR", "9"))
    APPOINTMENT_LAST_HOUR: int = int(os.getenv("APPOINTMENT_LAST_HOUR", "17"))
    APPOINTMENT_SLOT_CAPACITY: int = int(os.getenv("APPOINTMENT_SLOT_CAPACITY", "1"))

    class Config:
        env_file = _ENV_FILE if _ENV_FILE else [".env", "../.env"]
        case_sensitive = True
        extra = "ignore"


settings = Settings()
