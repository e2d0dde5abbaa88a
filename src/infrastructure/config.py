from typing import Tuple

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

# Models the gateway may invoke. The first entry is the default.
ALLOWED_MODELS: Tuple[str, ...] = (
    "models/gemini-2.5-pro",
    "models/gemini-2.5-pro-preview-06-05",
    "models/gemini-2.5-pro-preview-05-06",
    "models/gemini-2.5-pro-preview-03-25",
    "models/gemini-2.5-flash",
    "models/gemini-2.5-flash-preview-09-2025",
    "models/gemini-2.5-flash-lite",
    "models/gemini-2.5-flash-lite-preview-09-2025",
    "models/gemini-flash-latest",
    "models/gemini-flash-lite-latest",
    "models/gemini-pro-latest",
    "models/gemini-2.0-flash",
    "models/gemini-2.0-flash-001",
    "models/gemini-2.0-flash-exp",
    "models/gemini-2.0-flash-lite",
    "models/gemini-2.0-flash-lite-001",
    "models/gemini-2.0-flash-lite-preview-02-05",
    "models/gemini-2.0-flash-thinking-exp",
    "models/gemini-2.0-flash-thinking-exp-01-21",
    "models/gemini-2.0-flash-thinking-exp-1219",
    "models/gemini-2.0-pro-exp",
    "models/gemini-2.0-pro-exp-02-05",
    "models/gemini-3-pro-preview",
)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    # --- Core App Settings ---
    FLASK_ENV: str = "production"
    DEBUG: bool = False
    PORT: int = 5000
    CLIENT_ORIGIN: str = ""

    # --- AI Services ---
    GEMINI_API_KEY: str = ""
    GEMINI_API_BASE: str = "https://generativelanguage.googleapis.com/v1beta"
    GEMINI_TEMPERATURE: float = 0.7
    GEMINI_MAX_OUTPUT_TOKENS: int = 2048
    GEMINI_TIMEOUT_SECONDS: float = 60.0

    # --- Generation limits ---
    MAX_QUESTION_COUNT: int = 50

    # --- Uploads ---
    MAX_FILES: int = 5
    MAX_FILE_SIZE_MB: int = 12

    # --- Logging ---
    LOG_LEVEL: str = "INFO"

    @property
    def max_file_size_bytes(self) -> int:
        return self.MAX_FILE_SIZE_MB * 1024 * 1024


class GatewayConfig(BaseModel):
    """
    Immutable slice of the settings handed to the model gateway.
    Built once at startup; tests construct it directly.
    """
    model_config = ConfigDict(frozen=True)

    api_key: str = ""
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    allowed_models: Tuple[str, ...] = ALLOWED_MODELS
    temperature: float = 0.7
    max_output_tokens: int = 2048
    timeout_seconds: float = 60.0

    @classmethod
    def from_settings(cls, app_settings: Settings) -> "GatewayConfig":
        return cls(
            api_key=app_settings.GEMINI_API_KEY,
            base_url=app_settings.GEMINI_API_BASE.rstrip("/"),
            temperature=app_settings.GEMINI_TEMPERATURE,
            max_output_tokens=app_settings.GEMINI_MAX_OUTPUT_TOKENS,
            timeout_seconds=app_settings.GEMINI_TIMEOUT_SECONDS,
        )


# Load settings
settings = Settings()

# Production readiness checks
if settings.FLASK_ENV == "production" and settings.DEBUG:
    raise ValueError("CRITICAL: DEBUG mode must be disabled in production.")
