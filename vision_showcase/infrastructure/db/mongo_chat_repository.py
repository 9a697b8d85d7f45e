# Standard library imports
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import RepositoryError
from ...domain.repositories.chat_repository import ChatRepository
from ...domain.models.chat_message import ChatMessage
from ...domain.constants import ChatMessageFields
from .mongo_connection import get_chat_message_collection


class MongoChatRepository(ChatRepository):
    """MongoDB implementation of ChatRepository"""

    def __init__(self, chat_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.chat_collection = chat_collection if chat_collection is not None else get_chat_message_collection()

    async def append(self, message: ChatMessage) -> ChatMessage:
        try:
            await self.chat_collection.insert_one(self._message_to_dict(message))
            return message
        except PyMongoError as e:
            raise RepositoryError(f"Error saving chat message: {str(e)}", operation="append")

    async def list_messages(self, limit: Optional[int] = None) -> List[ChatMessage]:
        """
        List chat history, oldest first

        Args:
            limit: Only return the most recent `limit` messages

        Returns:
            List of ChatMessage domain models
        """
        if limit is not None and limit <= 0:
            return []

        try:
            if limit is None:
                cursor = self.chat_collection.find({}).sort(ChatMessageFields.MONGO_ID, ASCENDING)
                return [self._document_to_message(document) async for document in cursor]

            cursor = self.chat_collection.find({}).sort(ChatMessageFields.MONGO_ID, DESCENDING).limit(limit)
            newest_first = [self._document_to_message(document) async for document in cursor]
            return list(reversed(newest_first))
        except PyMongoError as e:
            raise RepositoryError(f"Error listing chat messages: {str(e)}", operation="list_messages")

    async def clear(self) -> None:
        try:
            await self.chat_collection.delete_many({})
        except PyMongoError as e:
            raise RepositoryError(f"Error clearing chat history: {str(e)}", operation="clear")

    def _message_to_dict(self, message: ChatMessage) -> Dict[str, Any]:
        return {
            ChatMessageFields.ID: message.id,
            ChatMessageFields.ROLE: message.role,
            ChatMessageFields.CONTENT: message.content,
            ChatMessageFields.TIMESTAMP: message.timestamp,
            ChatMessageFields.METADATA: message.metadata,
        }

    def _document_to_message(self, document: Dict[str, Any]) -> ChatMessage:
        return ChatMessage(
            id=document[ChatMessageFields.ID],
            role=document.get(ChatMessageFields.ROLE, "user"),
            content=document.get(ChatMessageFields.CONTENT, ""),
            timestamp=int(document.get(ChatMessageFields.TIMESTAMP, 0)),
            metadata=document.get(ChatMessageFields.METADATA),
        )
