"""
Configuration settings for the JobBoard service
Storage is a key-value table in SQLite by default
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "JobBoard"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Key-value storage (the store's durable collections)
    DATABASE_URL: str = "sqlite:///./jobboard.db"
    STORAGE_BACKEND: str = "database"  # database | memory
    STORAGE_KEY_PREFIX: str = "jb_"

    # Seed two demo postings when no jobs have been persisted yet
    SEED_DEMO_JOBS: bool = True

    # Super-administrator override credential (not a stored account)
    ADMIN_EMAIL: str = "admin@jobboard.local"
    ADMIN_PASSWORD: str = "admin"
    ADMIN_NAME: str = "ADMIN"
    ADMIN_ID: str = "admin_id"

    # Google Gemini AI (resume parsing)
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-1.5-flash"

    class Config:
        env_file = ".env"
        extra = "allow"


settings = Settings()
