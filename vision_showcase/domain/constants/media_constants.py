"""
Shared constants for image uploads and analysis types.

Used by the analysis controllers, the upload storage and the analysis use
cases. Single place for easier updates.
"""

# -----------------------------------------------------------------------------
# Image uploads
# -----------------------------------------------------------------------------
ALLOWED_IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".webp", ".bmp", ".gif"})

# Multipart field names used by the upload endpoints
IMAGE_FORM_FIELD = "image"
BATCH_IMAGES_FORM_FIELD = "images"

# -----------------------------------------------------------------------------
# Analysis types (one per upload endpoint)
# -----------------------------------------------------------------------------
ANALYSIS_CLASSIFICATION = "classification"
ANALYSIS_DETECTION = "detection"
ANALYSIS_SEGMENTATION = "segmentation"
ANALYSIS_FACIAL = "facial"
ANALYSIS_OCR = "ocr"
ANALYSIS_AUTONOMOUS = "autonomous"
ANALYSIS_ENHANCED_CLASSIFICATION = "enhanced-classification"

ANALYSIS_TYPES = frozenset({
    ANALYSIS_CLASSIFICATION,
    ANALYSIS_DETECTION,
    ANALYSIS_SEGMENTATION,
    ANALYSIS_FACIAL,
    ANALYSIS_OCR,
    ANALYSIS_AUTONOMOUS,
    ANALYSIS_ENHANCED_CLASSIFICATION,
})
