import logging
from typing import Optional

import boto3
from botocore.config import Config

from tubely.config import settings
from tubely.core.config import settings as app_settings
from tubely.services.uploader.interfaces import FileUploader
from tubely.services.uploader.upload_service import FileUploadService

logger = logging.getLogger(__name__)


class S3Uploader(FileUploader):
    """S3 bucket upload implementation"""
    def __init__(self, bucket_name: str, region: str, endpoint_url: Optional[str] = None,
                 access_key: Optional[str] = None, secret_key: Optional[str] = None):
        self.bucket_name = bucket_name
        self.region = region
        self.endpoint_url = endpoint_url
        self.boto_client = boto3.client(
                's3',
                endpoint_url=endpoint_url,
                aws_access_key_id=access_key,
                aws_secret_access_key=secret_key,
                config=Config(
                    region_name=region,
                    signature_version='s3v4'
                )
            )

    def upload(self, local_path: str, object_key: str, content_type: str) -> bool:
        try:
            self.boto_client.upload_file(
                local_path,
                self.bucket_name,
                object_key,
                ExtraArgs={'ContentType': content_type}
            )
            logger.info(f"Uploaded {object_key} to bucket {self.bucket_name}")
            return True
        except Exception as e:
            logger.error(f"Upload failed for {object_key}: {str(e)}")
            return False

    def public_url(self, object_key: str) -> str:
        if self.endpoint_url:
            return f"{self.endpoint_url.rstrip('/')}/{self.bucket_name}/{object_key}"
        return f"https://{self.bucket_name}.s3.{self.region}.amazonaws.com/{object_key}"

class S3Config:
    """Immutable configuration object"""
    def __init__(self, bucket: str, region: str, endpoint: Optional[str] = None,
                 access_key: Optional[str] = None, secret_key: Optional[str] = None):
        self.bucket = bucket
        self.region = region
        self.endpoint = endpoint
        self.access_key = access_key
        self.secret_key = secret_key

class UploadServiceBuilder:
    """Constructs service with dependencies"""
    @staticmethod
    def build(object_prefix: str = "") -> FileUploadService:
        config = S3Config(
            bucket=settings.S3_BUCKET,
            region=settings.S3_REGION,
            endpoint=settings.S3_ENDPOINT,
            access_key=settings.AWS_ACCESS_KEY_ID,
            secret_key=settings.AWS_SECRET_ACCESS_KEY
        )
        uploader = S3Uploader(
            bucket_name=config.bucket,
            region=config.region,
            endpoint_url=config.endpoint,
            access_key=config.access_key,
            secret_key=config.secret_key
        )
        return FileUploadService(uploader, app_settings.temp_dir, object_prefix)
