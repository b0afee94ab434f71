"""
Slack Web API client.

Every operation resolves to ``Ok(value)`` or ``Err(error)``; both unpack as
``error, value = result``.
"""

from slack_client.auth import MissingCredentialError, TokenStore
from slack_client.config import ConfigurationError, SlackSettings
from slack_client.http import ApiHttpError, HttpClient, PaginationLimitError, SlackApiError
from slack_client.models import Credential, Err, Ok, Result
from slack_client.services import SlackService, build_service

__version__ = "0.1.0"
__all__ = [
    "ApiHttpError",
    "ConfigurationError",
    "Credential",
    "Err",
    "HttpClient",
    "MissingCredentialError",
    "Ok",
    "PaginationLimitError",
    "Result",
    "SlackApiError",
    "SlackService",
    "SlackSettings",
    "TokenStore",
    "build_service",
]
