"""Constants for ChatMessage model field names"""


class ChatMessageFields:
    """Field name constants for ChatMessage model"""
    ID = "id"
    ROLE = "role"
    CONTENT = "content"
    TIMESTAMP = "timestamp"
    METADATA = "metadata"

    MONGO_ID = "_id"
