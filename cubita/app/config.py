from __future__ import annotations

from typing import Optional

from pydantic import AnyUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8-sig",
        case_sensitive=False,
        extra="ignore",
    )

    # CMS (Strapi)
    CMS_URL: AnyUrl = AnyUrl("https://natural-dinosaurs-5b6cbd810f.strapiapp.com")
    CMS_API_TOKEN: Optional[str] = None
    CMS_TIMEOUT_SECONDS: float = 10.0
    CMS_REVALIDATE_SECONDS: int = 60

    # Public site
    SITE_URL: AnyUrl = AnyUrl("https://cubitaproducciones.com")
    SITE_NAME: str = "Cubita Producciones"
    DEFAULT_OG_IMAGE_PATH: str = "/og-image.jpg"

    # Mail
    MAIL_BACKEND: str = "smtp"  # smtp | console
    SMTP_HOST: Optional[str] = None
    SMTP_PORT: int = 587
    SMTP_USER: Optional[str] = None
    SMTP_PASS: Optional[str] = None
    SMTP_USE_TLS: bool = True
    EMAIL_FROM: str = "no-reply@cubitaproducciones.com"
    EMAIL_TO: str = "info@cubitaproducciones.com"

    APP_ENV: str = "local"
    LOG_LEVEL: str = "INFO"
    FRONTEND_CORS_ORIGINS: list[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "https://cubitaproducciones.com",
            "https://www.cubitaproducciones.com",
        ],
    )

    @property
    def cms_base_url(self) -> str:
        return str(self.CMS_URL).rstrip("/")

    @property
    def site_base_url(self) -> str:
        return str(self.SITE_URL).rstrip("/")

    @property
    def default_og_image(self) -> str:
        return f"{self.site_base_url}/{self.DEFAULT_OG_IMAGE_PATH.lstrip('/')}"


settings = Settings()
