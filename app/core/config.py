from pydantic_settings import BaseSettings
from typing import Optional, List

class Settings(BaseSettings):
    PROJECT_NAME: str = "Travel Requests API"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"
    SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7
    VERIFICATION_TOKEN_EXPIRE_MINUTES: int = 60

    # CORS
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Database Configuration
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: str = "5432"
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_NAME: str = "travel_requests"

    DATABASE_URL: str = ""
    TEST_DATABASE_URL: Optional[str] = None

    def __init__(self, **data):
        super().__init__(**data)
        if not self.DATABASE_URL:
            self.DATABASE_URL = (
                f'postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}'
                f'@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}'
            )

    # Email
    EMAILS_ENABLED: bool = True
    SENDGRID_API_KEY: str = ""
    EMAILS_FROM_EMAIL: str = "no-reply@travel-requests.local"
    EMAILS_FROM_NAME: str = "Travel Requests"
    FRONTEND_BASE_URL: str = "http://localhost:3000"

    LOG_TO_FILE: bool = True

    class Config:
        env_file = ".env"

settings = Settings()
