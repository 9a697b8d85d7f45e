# Standard library imports
import os
from typing import Final, List, Optional


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Storage Configuration ("memory" keeps everything in-process, "mongo" uses MongoDB)
        self.storage_backend: Final[str] = os.getenv("STORAGE_BACKEND", "memory").strip().lower()
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "vision_showcase")

        # Upload Configuration
        self.upload_dir: Final[str] = os.getenv("UPLOAD_DIR", "uploads")
        self.upload_max_mb: Final[int] = int(os.getenv("UPLOAD_MAX_MB", "20"))

        # HTTP Configuration
        self.cors_origins: Final[List[str]] = _split_csv(
            os.getenv(
                "CORS_ORIGINS",
                "http://localhost:3000,http://localhost:5173",
            )
        )
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # Training simulation defaults
        self.training_batch_size: Final[int] = int(os.getenv("TRAINING_BATCH_SIZE", "32"))
        self.training_epochs: Final[int] = int(os.getenv("TRAINING_EPOCHS", "10"))
        self.training_learning_rate: Final[float] = float(os.getenv("TRAINING_LEARNING_RATE", "0.001"))
        self.training_checkpoint_frequency: Final[int] = int(
            os.getenv("TRAINING_CHECKPOINT_FREQUENCY", "5")
        )
        # Pause between simulated batches so progress is observable by clients
        self.training_step_delay_seconds: Final[float] = float(
            os.getenv("TRAINING_STEP_DELAY_SECONDS", "0.0")
        )
        self.image_cache_limit: Final[int] = int(os.getenv("IMAGE_CACHE_LIMIT", "1000"))

        # Feedback learning
        self.fine_tune_min_samples: Final[int] = int(os.getenv("FINE_TUNE_MIN_SAMPLES", "10"))
        self.auto_fine_tune_interval: Final[int] = int(os.getenv("AUTO_FINE_TUNE_INTERVAL", "10"))

        # Chat assistant
        self.chat_history_limit: Final[int] = int(os.getenv("CHAT_HISTORY_LIMIT", "200"))


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
