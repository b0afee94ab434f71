from __future__ import annotations

from slack_client.http import HttpClient
from slack_client.models import Result


class UsersApi:
    def __init__(self, http_client: HttpClient):
        self._http_client = http_client

    def list_members(self) -> Result:
        return self._http_client.get_paginated("users.list", {}, "members")

    def info(self, user_id: str) -> Result:
        return self._http_client.get("users.info", {"user": user_id})
