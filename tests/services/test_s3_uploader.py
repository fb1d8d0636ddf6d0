import io
from unittest.mock import patch

import pytest
from botocore.exceptions import ClientError
from starlette.datastructures import UploadFile

from tubely.services.uploader import FileUploadService, S3Uploader, UploadFailedError


@pytest.fixture
def boto_client():
    with patch("tubely.services.uploader.s3_uploader.boto3.client") as mock_client:
        yield mock_client.return_value


class TestS3Uploader:

    def test_upload_passes_content_type(self, boto_client):
        uploader = S3Uploader("videos-bucket", "us-east-2")

        assert uploader.upload("/tmp/abc.mp4", "abc.mp4", "video/mp4") is True
        boto_client.upload_file.assert_called_once_with(
            "/tmp/abc.mp4",
            "videos-bucket",
            "abc.mp4",
            ExtraArgs={"ContentType": "video/mp4"}
        )

    def test_upload_failure_returns_false(self, boto_client):
        boto_client.upload_file.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "denied"}}, "PutObject"
        )
        uploader = S3Uploader("videos-bucket", "us-east-2")

        assert uploader.upload("/tmp/abc.mp4", "abc.mp4", "video/mp4") is False

    def test_public_url_for_aws(self, boto_client):
        uploader = S3Uploader("videos-bucket", "us-east-2")

        assert uploader.public_url("abc.mp4") == "https://videos-bucket.s3.us-east-2.amazonaws.com/abc.mp4"

    def test_public_url_for_custom_endpoint(self, boto_client):
        uploader = S3Uploader("videos-bucket", "auto", endpoint_url="http://localhost:9000/")

        assert uploader.public_url("abc.mp4") == "http://localhost:9000/videos-bucket/abc.mp4"


class TestFileUploadService:

    @pytest.fixture
    def source(self):
        return UploadFile(io.BytesIO(b"mp4 payload"), filename="clip.mp4")

    @pytest.mark.asyncio
    async def test_execute_upload(self, fake_uploader, upload_temp_dir, source):
        service = FileUploadService(fake_uploader, str(upload_temp_dir), object_prefix="videos/")

        object_key = await service.execute_upload(source, "mp4", "video/mp4")

        assert object_key.startswith("videos/")
        assert object_key.endswith(".mp4")
        local_path, key, content_type = fake_uploader.upload.call_args.args
        assert key == object_key
        assert content_type == "video/mp4"
        assert list(upload_temp_dir.iterdir()) == []

    @pytest.mark.asyncio
    async def test_random_names_per_upload(self, fake_uploader, upload_temp_dir):
        service = FileUploadService(fake_uploader, str(upload_temp_dir))

        first = await service.execute_upload(UploadFile(io.BytesIO(b"a")), "mp4", "video/mp4")
        second = await service.execute_upload(UploadFile(io.BytesIO(b"b")), "mp4", "video/mp4")

        assert first != second

    @pytest.mark.asyncio
    async def test_failed_transfer_raises_and_cleans_up(self, fake_uploader, upload_temp_dir, source):
        fake_uploader.upload.return_value = False
        service = FileUploadService(fake_uploader, str(upload_temp_dir))

        with pytest.raises(UploadFailedError):
            await service.execute_upload(source, "mp4", "video/mp4")

        assert list(upload_temp_dir.iterdir()) == []
