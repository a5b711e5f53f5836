from pydantic_settings import BaseSettings
from typing import List
import os

DEFAULT_JWT_SECRET = "dev-secret-change-me"

class Settings(BaseSettings):
    # Application
    APP_NAME: str = "SmileCare Dental"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    TESTING: bool = os.getenv("TESTING", "0").lower() in ("1", "true", "t", "yes", "y")

    # Database
    DATABASE_URL: str = "sqlite:///./smilecare.db"
    TEST_DATABASE_URL: str = "sqlite://"

    # Security
    JWT_SECRET: str = DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"
    SESSION_TOKEN_EXPIRE_DAYS: int = 7
    BCRYPT_ROUNDS: int = 10

    # Staff account created on first startup
    STAFF_SEED_EMAIL: str = "staff@smilecare.com"
    STAFF_SEED_PASSWORD: str = "password123"
    STAFF_SEED_NAME: str = "Clinic Staff"

    # CORS
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173", "http://testserver"]

    @property
    def get_database_url(self):
        """Return the appropriate database URL based on if we're testing"""
        if self.TESTING:
            return self.TEST_DATABASE_URL
        return self.DATABASE_URL

    @property
    def uses_default_secret(self) -> bool:
        return self.JWT_SECRET == DEFAULT_JWT_SECRET

    class Config:
        env_file = ".env"
        case_sensitive = True

# Create settings instance
settings = Settings()

def get_settings() -> Settings:
    """Settings dependency, overridable in tests."""
    return settings
