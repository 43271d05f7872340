"""
service settings read from environment variables.

follows the same env-only pattern as the logger configuration. credentials
are optional: a missing key disables the matching provider instead of
stopping the process.
"""

import os
import tempfile
from pathlib import Path
from typing import List, Optional

MAX_UPLOAD_BYTES = 5 * 1024 * 1024  # 5 MiB


def _optional(name: str) -> Optional[str]:
    value = os.getenv(name, "").strip()
    return value or None


class Settings:
    """environment-based service settings"""

    def __init__(self):
        # server
        self.host: str = os.getenv("SERVER_HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", "8000"))
        self.cors_origins: List[str] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
            if origin.strip()
        ]

        # claim-review provider (google fact check tools)
        self.google_api_key: Optional[str] = _optional("GOOGLE_API_KEY")

        # vision provider: inline service-account JSON wins over a key file
        self.google_service_account_key: Optional[str] = _optional("GOOGLE_SERVICE_ACCOUNT_KEY")
        self.google_service_account_key_path: Optional[str] = _optional("GOOGLE_SERVICE_ACCOUNT_KEY_PATH")

        # language model provider
        self.gemini_api_key: Optional[str] = _optional("GEMINI_API_KEY")
        self.gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

        # zero-shot classification provider
        self.hf_api_key: Optional[str] = _optional("HF_API_KEY")
        self.hf_model_name: str = os.getenv("HF_MODEL_NAME", "facebook/bart-large-mnli")
        self.hf_api_base_url: str = os.getenv(
            "HF_API_BASE_URL", "https://api-inference.huggingface.co/models"
        )

        # news provider
        self.news_api_key: Optional[str] = _optional("NEWS_API_KEY")

        # image ingestion
        self.upload_dir: Path = Path(
            os.getenv("UPLOAD_DIR", str(Path(tempfile.gettempdir()) / "factlens-uploads"))
        )
        self.max_upload_bytes: int = int(os.getenv("MAX_UPLOAD_BYTES", MAX_UPLOAD_BYTES))


def get_settings() -> Settings:
    """build settings from the current environment"""
    return Settings()
