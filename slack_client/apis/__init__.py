from .bots_api import BotsApi
from .chat_api import ChatApi
from .conversations_api import ConversationsApi
from .files_api import FilesApi
from .users_api import UsersApi

__all__ = ["BotsApi", "ChatApi", "ConversationsApi", "FilesApi", "UsersApi"]
