import os
from typing import List
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Always load .env from root
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
load_dotenv(os.path.join(BASE_DIR, ".env"))


def split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./ora_blu.db"

    # Uploaded files (payment proofs, space images, logo, carousel)
    UPLOAD_DIR: str = "./uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"
    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024
    ALLOWED_UPLOAD_EXTENSIONS: str = ".jpg,.jpeg,.png,.gif,.webp,.pdf"
    ALLOWED_UPLOAD_CONTENT_TYPES: str = (
        "image/jpeg,image/png,image/gif,image/webp,application/pdf"
    )

    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"
    SEED_SAMPLE_SPACES: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def cors_origins(self) -> List[str]:
        return split_csv(self.CORS_ORIGINS)

    @property
    def allowed_upload_extensions(self) -> List[str]:
        return [ext.lower() for ext in split_csv(self.ALLOWED_UPLOAD_EXTENSIONS)]

    @property
    def allowed_upload_content_types(self) -> List[str]:
        return [ct.lower() for ct in split_csv(self.ALLOWED_UPLOAD_CONTENT_TYPES)]


settings = Settings()
