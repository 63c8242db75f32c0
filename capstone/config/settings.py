"""Application settings and environment configuration."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root
PROJECT_ROOT = Path(__file__).parent.parent.parent
load_dotenv(PROJECT_ROOT / ".env")


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def _optional_int(raw: str | None) -> int | None:
    if raw is None or not raw.strip():
        return None
    return int(raw)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # Upstream provider behind the /api/chat endpoint
    anthropic_api_key: str = os.getenv("ANTHROPIC_API_KEY", "")
    default_model: str = os.getenv("CHAT_MODEL", "claude-sonnet-4-5-20250929")
    chat_temperature: float = float(os.getenv("CHAT_TEMPERATURE", "0.7"))
    chat_max_tokens: int = int(os.getenv("CHAT_MAX_TOKENS", "2048"))

    # Companion strategy: "local" (canned blocks) or "remote" (hosted endpoint)
    companion_strategy: str = os.getenv("COMPANION_STRATEGY", "local")
    companion_endpoint_url: str = os.getenv(
        "COMPANION_ENDPOINT_URL", "http://127.0.0.1:5001/api/chat"
    )
    companion_api_key: str = os.getenv("COMPANION_API_KEY", "")
    companion_timeout: float = float(os.getenv("COMPANION_TIMEOUT", "30"))

    # Generation
    title_max_attempts: int = int(os.getenv("TITLE_MAX_ATTEMPTS", "50"))
    # Unset means every generation varies; set it to make runs reproducible
    generation_seed: int | None = _optional_int(os.getenv("GENERATION_SEED"))

    # Editor
    editor_detail_placeholder: bool = (
        os.getenv("EDITOR_DETAIL_PLACEHOLDER", "true").lower() == "true"
    )

    # Output artifacts
    output_dir: str = os.getenv("OUTPUT_DIR", str(PROJECT_ROOT / "data" / "outputs"))

    # Server
    port: int = int(os.getenv("PORT", "5001"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    cors_origins: list[str] = field(
        default_factory=lambda: _split_origins(
            os.getenv(
                "CORS_ORIGINS",
                "http://localhost:5173,http://127.0.0.1:5173,"
                "http://localhost:5001,http://127.0.0.1:5001",
            )
        )
    )

    def validate(self) -> list[str]:
        """Validate required settings are present."""
        errors = []
        if self.companion_strategy not in ("local", "remote"):
            errors.append(
                f"COMPANION_STRATEGY must be 'local' or 'remote', got '{self.companion_strategy}'"
            )
        if self.companion_strategy == "remote" and not self.companion_endpoint_url:
            errors.append("COMPANION_ENDPOINT_URL is not set")
        if self.title_max_attempts < 1:
            errors.append("TITLE_MAX_ATTEMPTS must be at least 1")
        return errors

    def validate_server(self) -> list[str]:
        """Validate settings the chat endpoint needs on top of the basics."""
        errors = self.validate()
        if not self.anthropic_api_key:
            errors.append("ANTHROPIC_API_KEY is not set")
        return errors


# Global settings instance
settings = Settings()
