from abc import ABC, abstractmethod
from typing import Optional, List
from ..models.chat_message import ChatMessage


class ChatRepository(ABC):
    """Repository interface - defines contract for chat history storage"""

    @abstractmethod
    async def append(self, message: ChatMessage) -> ChatMessage:
        """Append a message to the history"""
        pass

    @abstractmethod
    async def list_messages(self, limit: Optional[int] = None) -> List[ChatMessage]:
        """Messages oldest first; with a limit, only the most recent ones"""
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Delete the whole history"""
        pass
