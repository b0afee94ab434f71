from __future__ import annotations

from slack_client.http import HttpClient
from slack_client.models import Credential, Result


class FilesApi:
    def __init__(self, http_client: HttpClient):
        self._http_client = http_client

    def shared_public_url(self, file_id: str) -> Result:
        # Slack only allows user tokens to publish files.
        return self._http_client.post(
            "files.sharedPublicURL",
            {"file": file_id},
            credential=Credential.USER,
        )
