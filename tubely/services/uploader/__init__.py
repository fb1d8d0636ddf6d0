"""
Uploader Service Package

Provides abstractions and implementations for uploading files to object storage.

Key Components:
- FileUploader: Abstract base class for upload implementations
- S3Uploader: S3 (and S3-compatible) implementation
- FileUploadService: Stages a payload on disk, uploads it, cleans up
- UploadServiceBuilder: Dependency injection helper
"""

from .interfaces import FileUploader
from .upload_service import FileUploadService, UploadFailedError
from .s3_uploader import S3Config, S3Uploader, UploadServiceBuilder

__all__ = [
    # Interfaces
    'FileUploader',

    # Implementations
    'S3Config',
    'S3Uploader',

    # Services
    'FileUploadService',
    'UploadFailedError',
    'UploadServiceBuilder'
]
