from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv


DEFAULT_BASE_URL = "https://slack.com/api/"


class ConfigurationError(ValueError):
    pass


@dataclass(frozen=True)
class SlackSettings:
    bot_token: str
    user_token: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: int = 30
    max_pages: int = 100
    page_limit: int = 200
    log_tokens: bool = False
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        # Method names are joined onto the base URL, so it must end in "/".
        if not self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url + "/")

    @staticmethod
    def from_env() -> "SlackSettings":
        _load_env_files()

        bot_token = os.getenv("SLACK_BOT_TOKEN", "").strip()
        user_token = os.getenv("SLACK_USER_TOKEN", "").strip() or None
        base_url = os.getenv("SLACK_BASE_URL", DEFAULT_BASE_URL).strip() or DEFAULT_BASE_URL

        timeout_seconds = _int_env("SLACK_TIMEOUT_SECONDS", 30)
        max_pages = _int_env("SLACK_MAX_PAGES", 100)
        page_limit = _int_env("SLACK_PAGE_LIMIT", 200)

        log_tokens = os.getenv("SLACK_LOG_TOKENS", "").strip().lower() in ("1", "true", "yes", "on")
        log_level = os.getenv("SLACK_LOG_LEVEL", "INFO").strip().upper() or "INFO"

        settings = SlackSettings(
            bot_token=bot_token,
            user_token=user_token,
            base_url=base_url,
            timeout_seconds=timeout_seconds,
            max_pages=max_pages,
            page_limit=page_limit,
            log_tokens=log_tokens,
            log_level=log_level,
        )
        settings.validate()
        return settings

    def validate(self) -> None:
        if not self.bot_token:
            raise ConfigurationError("Missing required settings: SLACK_BOT_TOKEN")

        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigurationError("SLACK_BASE_URL must be an http(s) URL")

        if self.timeout_seconds <= 0:
            raise ConfigurationError("SLACK_TIMEOUT_SECONDS must be greater than 0")

        if self.max_pages < 0:
            raise ConfigurationError("SLACK_MAX_PAGES must be 0 or greater")

        if self.page_limit < 0:
            raise ConfigurationError("SLACK_PAGE_LIMIT must be 0 or greater")

        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level not in valid_levels:
            raise ConfigurationError(
                "SLACK_LOG_LEVEL must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
            )


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def _load_env_files() -> None:
    """Load SLACK_ENV_FILE, then the nearest .env above the working directory."""
    explicit = os.getenv("SLACK_ENV_FILE", "").strip()
    if explicit:
        load_dotenv(Path(explicit).expanduser(), override=False)

    discovered = find_dotenv(usecwd=True)
    if discovered:
        load_dotenv(discovered, override=False)
