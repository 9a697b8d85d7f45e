from .upload_storage import UploadStorage, StoredUpload, safe_filename

__all__ = ["UploadStorage", "StoredUpload", "safe_filename"]
