import os
from logging.config import dictConfig

from dotenv import load_dotenv

load_dotenv()


def _split_names(value: str) -> list[str]:
    return [name.strip() for name in value.split(",") if name.strip()]


class Settings:
    def __init__(self):
        self.GITHUB_TOKEN: str | None = os.getenv("GITHUB_TOKEN")

        # Webhook
        self.GITHUB_WEBHOOK_SECRET: str = os.getenv("GITHUB_WEBHOOK_SECRET", "")

        # Bots answering to "@<name> <command>", in matching order
        self.BOT_NAMES: list[str] = _split_names(os.getenv("BOT_NAMES", ""))

        # Optional with defaults
        self.GITHUB_API_URL: str = os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/")
        self.REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "60"))
        self.ACK_REACTION: str = os.getenv("ACK_REACTION", "eyes")

        # Server
        self.PORT: int = int(os.getenv("PORT", "8080"))
        self.HOST: str = os.getenv("HOST", "0.0.0.0")

        # Logging
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    def validate_settings(self):
        if not self.GITHUB_TOKEN:
            raise ValueError("GITHUB_TOKEN environment variable not set.")
        if not self.BOT_NAMES:
            raise ValueError("BOT_NAMES environment variable not set.")


settings = Settings()

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "()": "uvicorn.logging.DefaultFormatter",
            "fmt": "%(levelprefix)s %(asctime)s - %(name)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "command_bot": {"handlers": ["default"], "level": settings.LOG_LEVEL, "propagate": False},
        "uvicorn.error": {"level": "INFO"},
        "uvicorn.access": {"handlers": ["default"], "level": "INFO", "propagate": False},
        "httpx": {"level": "WARNING"},
    },
}

def setup_logging():
    settings.validate_settings()
    dictConfig(LOGGING_CONFIG)
