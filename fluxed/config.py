import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseModel):
    gemini_api_key: str | None = os.getenv("GEMINI_API_KEY")
    gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
    question_quota: int = int(os.getenv("QUESTION_QUOTA", "10"))
    points_per_correct: int = int(os.getenv("POINTS_PER_CORRECT", "10"))
    promotion_streak: int = int(os.getenv("PROMOTION_STREAK", "3"))
    revision_streak: int = int(os.getenv("REVISION_STREAK", "3"))
    log_dir: str = os.getenv("LOG_DIR", os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "logs")))

settings = Settings()
