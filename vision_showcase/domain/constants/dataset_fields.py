"""Constants for DatasetConfig model field names"""


class DatasetFields:
    """Field name constants for DatasetConfig model"""
    NAME = "name"
    VERSION = "version"
    TOTAL_IMAGES = "total_images"
    CATEGORIES = "categories"
    SPLIT_RATIO = "split_ratio"
    AUGMENTATION_CONFIG = "augmentation_config"
    PREPROCESSING = "preprocessing"

    MONGO_ID = "_id"
