from __future__ import annotations

from slack_client.config import SlackSettings
from slack_client.models import Credential


class MissingCredentialError(RuntimeError):
    pass


class TokenStore:
    """Holds the bot and user tokens for the lifetime of a client."""

    def __init__(self, bot_token: str, user_token: str | None = None):
        self._bot_token = bot_token
        self._user_token = user_token

    @classmethod
    def from_settings(cls, settings: SlackSettings) -> "TokenStore":
        return cls(settings.bot_token, settings.user_token)

    @property
    def has_user_token(self) -> bool:
        return bool(self._user_token)

    def resolve(self, credential: Credential) -> str:
        if credential is Credential.USER:
            if not self._user_token:
                raise MissingCredentialError(
                    "This request needs a user token. Set SLACK_USER_TOKEN to enable it."
                )
            return self._user_token

        if not self._bot_token:
            raise MissingCredentialError("Missing bot token. Set SLACK_BOT_TOKEN.")
        return self._bot_token
