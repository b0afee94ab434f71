from __future__ import annotations

import logging
from typing import Any

import requests

from slack_client.apis import BotsApi, ChatApi, ConversationsApi, FilesApi, UsersApi
from slack_client.auth import TokenStore
from slack_client.config import SlackSettings
from slack_client.http import HttpClient
from slack_client.models import Result


class SlackService:
    """
    Named Slack operations, each returning an ``Ok``/``Err`` result.

    Example:
        service = build_service()
        error, channels = service.get_channels()
        if error is None:
            for channel in channels:
                print(channel["name"])

    """

    def __init__(
        self,
        http_client: HttpClient,
        conversations_api: ConversationsApi,
        users_api: UsersApi,
        chat_api: ChatApi,
        files_api: FilesApi,
        bots_api: BotsApi,
    ):
        self._http_client = http_client
        self._conversations_api = conversations_api
        self._users_api = users_api
        self._chat_api = chat_api
        self._files_api = files_api
        self._bots_api = bots_api

    @classmethod
    def from_tokens(
        cls,
        bot_token: str,
        user_token: str | None = None,
        session: requests.Session | None = None,
        logger: logging.Logger | None = None,
    ) -> "SlackService":
        settings = SlackSettings(bot_token=bot_token, user_token=user_token)
        settings.validate()
        return build_service(settings, session=session, logger=logger)

    def __enter__(self) -> "SlackService":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._http_client.close()

    def get_channels(self) -> Result:
        return self._conversations_api.list_channels()

    def get_members(self) -> Result:
        return self._users_api.list_members()

    def file_public_url(self, file_id: str) -> Result:
        return self._files_api.shared_public_url(file_id)

    def user_info(self, user_id: str) -> Result:
        return self._users_api.info(user_id)

    def get_permalink(self, channel_id: str, message_ts: str) -> Result:
        return self._chat_api.get_permalink(channel_id, message_ts)

    def post_message(
        self,
        channel: str,
        text: str,
        mrkdwn: bool = True,
        attachments: list[dict[str, Any]] | None = None,
    ) -> Result:
        return self._chat_api.post_message(channel, text, mrkdwn, attachments)

    def open_direct_message(self, user: str) -> Result:
        return self._conversations_api.open_direct_message(user)

    def get_bot_info(self, bot_id: str) -> Result:
        return self._bots_api.info(bot_id)


def build_service(
    settings: SlackSettings | None = None,
    session: requests.Session | None = None,
    logger: logging.Logger | None = None,
) -> SlackService:
    settings = settings or SlackSettings.from_env()
    http_client = HttpClient(
        settings,
        tokens=TokenStore.from_settings(settings),
        session=session,
        logger=logger,
    )
    return SlackService(
        http_client=http_client,
        conversations_api=ConversationsApi(http_client),
        users_api=UsersApi(http_client),
        chat_api=ChatApi(http_client),
        files_api=FilesApi(http_client),
        bots_api=BotsApi(http_client),
    )
