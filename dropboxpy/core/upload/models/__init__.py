"""Upload models."""
from .upload_models import UploadProgress, MultipartBody

__all__ = [
    'UploadProgress',
    'MultipartBody',
]
