from __future__ import annotations

import logging
from typing import Any

import requests

from slack_client.auth import MissingCredentialError, TokenStore
from slack_client.config import SlackSettings
from slack_client.logging_utils import redact_token
from slack_client.models import Credential, Err, Ok, Result


class ApiHttpError(RuntimeError):
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class SlackApiError(RuntimeError):
    """Slack answered the request but reported ``ok: false``."""

    def __init__(self, error: str, response: dict[str, Any] | None = None):
        super().__init__(error)
        self.error = error
        self.response = response or {}


class PaginationLimitError(RuntimeError):
    def __init__(self, path: str, max_pages: int):
        super().__init__(f"{path} returned more than {max_pages} pages")
        self.path = path
        self.max_pages = max_pages


class HttpClient:
    """
    Thin layer over a ``requests.Session`` pointed at the Slack Web API.

    Every call issues at most one request per page and resolves to a Result;
    nothing raised by the transport or reported by Slack escapes.
    """

    def __init__(
        self,
        settings: SlackSettings,
        tokens: TokenStore | None = None,
        session: requests.Session | None = None,
        logger: logging.Logger | None = None,
    ):
        self._settings = settings
        self._tokens = tokens or TokenStore.from_settings(settings)
        self._logger = logger or logging.getLogger(__name__)
        # Injected sessions belong to the caller and are left untouched.
        if session is None:
            session = requests.Session()
            session.headers.update({"Accept": "application/json"})
        self._session = session

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def build_url(self, path: str) -> str:
        return f"{self._settings.base_url}{path.lstrip('/')}"

    def _scrub(self, text: str, token: str | None) -> str:
        if not token or self._settings.log_tokens:
            return text
        return text.replace(token, redact_token(token))

    def call_api(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        payload: dict[str, Any] | None = None,
        token: str | None = None,
    ) -> Result:
        """
        Send one request and normalize the outcome.

        ``token`` is only used to keep the credential out of failure logs;
        the returned error is the original exception.
        """
        url = self.build_url(path)
        try:
            if method == "POST":
                response = self._session.post(
                    url,
                    headers=headers,
                    json=payload,
                    timeout=self._settings.timeout_seconds,
                )
            else:
                response = self._session.get(
                    url,
                    headers=headers,
                    params=params,
                    timeout=self._settings.timeout_seconds,
                )

            if not response.ok:
                message = response.text[:500]
                raise ApiHttpError(
                    status_code=response.status_code,
                    message=f"HTTP {response.status_code}: {message}",
                )

            body = response.json() if response.content else {}
        except (requests.RequestException, ApiHttpError, ValueError) as exc:
            # Transport errors quote the full URL, query string and token included.
            self._logger.warning(
                "Got error calling Slack API: %s",
                self._scrub(str(exc), token),
                extra={"url": url, "err": self._scrub(repr(exc), token)},
            )
            return Err(exc)

        if not isinstance(body, dict):
            body = {"ok": False, "error": "invalid_response"}

        if body.get("ok"):
            return Ok(body)

        self._logger.warning(
            "Got Slack error: %s",
            body.get("error"),
            extra={"url": url, "response": body},
        )
        return Err(SlackApiError(str(body.get("error") or "unknown_error"), body))

    def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        credential: Credential = Credential.BOT,
    ) -> Result:
        try:
            token = self._tokens.resolve(credential)
        except MissingCredentialError as exc:
            self._logger.warning("Cannot call %s: %s", path, exc, extra={"url": self.build_url(path)})
            return Err(exc)

        query = dict(params or {})
        query["token"] = token
        return self.call_api("GET", path, params=query, token=token)

    def post(
        self,
        path: str,
        body: dict[str, Any],
        credential: Credential = Credential.BOT,
    ) -> Result:
        try:
            token = self._tokens.resolve(credential)
        except MissingCredentialError as exc:
            self._logger.warning("Cannot call %s: %s", path, exc, extra={"url": self.build_url(path)})
            return Err(exc)

        logged_token = token if self._settings.log_tokens else redact_token(token)
        self._logger.info(
            "About to make POST request to %s",
            path,
            extra={"path": path, "body": body, "token": logged_token},
        )
        return self.call_api(
            "POST",
            path,
            headers={
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json;charset=utf-8",
            },
            payload=body,
            token=token,
        )

    def get_paginated(
        self,
        path: str,
        params: dict[str, Any] | None,
        list_key: str,
        credential: Credential = Credential.BOT,
        max_pages: int | None = None,
    ) -> Result:
        """
        Follow ``response_metadata.next_cursor`` until Slack stops returning one.

        Returns ``Ok`` with the ``list_key`` items of every page in order, or
        the first ``Err`` encountered; items from earlier pages are dropped.
        ``max_pages`` overrides the configured bound, 0 disables it.
        """
        base_params = dict(params or {})
        if self._settings.page_limit and "limit" not in base_params:
            base_params["limit"] = self._settings.page_limit
        page_bound = self._settings.max_pages if max_pages is None else max_pages

        items: list[Any] = []
        cursor: str | None = None
        pages = 0
        while True:
            if page_bound and pages >= page_bound:
                error = PaginationLimitError(path, page_bound)
                self._logger.warning("Stopped paginating %s: %s", path, error, extra={"url": self.build_url(path)})
                return Err(error)

            page_params = dict(base_params)
            if cursor:
                page_params["cursor"] = cursor

            result = self.get(path, page_params, credential)
            if result.is_err:
                return result
            pages += 1

            page = result.value
            items.extend(page.get(list_key) or [])

            metadata = page.get("response_metadata") or {}
            cursor = metadata.get("next_cursor") or None
            if not cursor:
                return Ok(items)
