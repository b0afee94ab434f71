from __future__ import annotations

from typing import Any

from slack_client.http import HttpClient
from slack_client.models import Result


class ChatApi:
    def __init__(self, http_client: HttpClient):
        self._http_client = http_client

    def post_message(
        self,
        channel: str,
        text: str,
        mrkdwn: bool = True,
        attachments: list[dict[str, Any]] | None = None,
    ) -> Result:
        body: dict[str, Any] = {
            "channel": channel,
            "text": text,
            "mrkdwn": mrkdwn,
            "as_user": False,
        }
        if attachments is not None:
            body["attachments"] = attachments
        return self._http_client.post("chat.postMessage", body)

    def get_permalink(self, channel_id: str, message_ts: str) -> Result:
        return self._http_client.get(
            "chat.getPermalink",
            {"channel": channel_id, "message_ts": message_ts},
        )
