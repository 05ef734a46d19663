from pydantic_settings import BaseSettings
from typing import Literal, Optional


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    # ── Application ──────────────────────────────────────────────
    app_name: str = "ShopDesk"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    api_version: str = "v1"

    # ── Session persistence ──────────────────────────────────────
    storage_backend: Literal["memory", "file", "mongo"] = "file"
    storage_path: str = ".shopdesk/storage.json"
    session_storage_key: str = "currentUser"

    # ── MongoDB (storage_backend = "mongo") ──────────────────────
    mongodb_uri: Optional[str] = None
    database_name: str = "shopdesk_db"
    storage_collection: str = "kv_store"

    # ── Session token ────────────────────────────────────────────
    secret_key: str = "change-me-in-production"
    algorithm: str = "HS256"

    # ── Login page ───────────────────────────────────────────────
    demo_logins_enabled: bool = True

    # ── CORS ─────────────────────────────────────────────────────
    cors_allowed_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
    ]
    cors_allow_credentials: bool = True
    cors_allowed_methods: list[str] = ["*"]
    cors_allowed_headers: list[str] = ["*"]

    class Config:
        env_file = ".env.local"
        extra = "ignore"


# ── Module-level singleton ──────────────────────────────────────
settings = Settings()
