from __future__ import annotations

from slack_client.http import HttpClient
from slack_client.models import Result


class BotsApi:
    def __init__(self, http_client: HttpClient):
        self._http_client = http_client

    def info(self, bot_id: str) -> Result:
        return self._http_client.get("bots.info", {"bot": bot_id})
