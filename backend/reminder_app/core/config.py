from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Settings(BaseModel):
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./reminders.db")
    jwt_secret: str = os.getenv("JWT_SECRET", "change-me")
    # 24h sessions
    jwt_expire_minutes: int = int(os.getenv("JWT_EXPIRE_MINUTES", "1440"))

    cors_origins: list[str] = _split_origins(
        os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
    )
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "5001"))

settings = Settings()
