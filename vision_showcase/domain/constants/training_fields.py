"""Constants for training-related model field names"""


class TrainingSampleFields:
    """Field name constants for TrainingSample model"""
    ID = "id"
    IMAGE = "image"
    FEEDBACK = "feedback"
    PREDICTIONS = "predictions"
    TIMESTAMP = "timestamp"

    MONGO_ID = "_id"


class ModelPerformanceFields:
    """Field name constants for ModelPerformance model"""
    MODEL_NAME = "model_name"
    ACCURACY = "accuracy"
    TOTAL_PREDICTIONS = "total_predictions"
    CORRECT_PREDICTIONS = "correct_predictions"
    AVG_CONFIDENCE = "avg_confidence"
    LAST_UPDATED = "last_updated"

    MONGO_ID = "_id"


class FeedbackWeightFields:
    """Field name constants for stored feedback weights"""
    KEY = "key"
    WEIGHT = "weight"

    MONGO_ID = "_id"
