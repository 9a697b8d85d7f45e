from .send_chat_message import SendChatMessageUseCase
from .chat_history import GetChatHistoryUseCase, ClearChatHistoryUseCase
from .chat_context import GetChatContextUseCase, UpdateChatContextUseCase, GetChatSuggestionsUseCase

__all__ = [
    "SendChatMessageUseCase",
    "GetChatHistoryUseCase",
    "ClearChatHistoryUseCase",
    "GetChatContextUseCase",
    "UpdateChatContextUseCase",
    "GetChatSuggestionsUseCase",
]
