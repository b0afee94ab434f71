from __future__ import annotations

from slack_client.http import HttpClient
from slack_client.models import Result


class ConversationsApi:
    def __init__(self, http_client: HttpClient):
        self._http_client = http_client

    def list_channels(self) -> Result:
        return self._http_client.get_paginated("conversations.list", {}, "channels")

    def open_direct_message(self, user: str) -> Result:
        return self._http_client.post("conversations.open", {"users": user})
