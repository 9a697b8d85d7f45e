"""Constants for AnalysisResult model field names"""


class ResultFields:
    """Field name constants for AnalysisResult model"""
    ID = "id"
    TYPE = "type"
    DATASET = "dataset"
    IMAGE_PATH = "image_path"
    PAYLOAD = "payload"
    TIMESTAMP = "timestamp"
    MODEL = "model"
    PROCESSING_TIME_MS = "processing_time_ms"

    # MongoDB specific
    MONGO_ID = "_id"
