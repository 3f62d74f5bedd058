"""MinIO implementation of the StorageClient interface."""

import io
import json
import posixpath
import uuid
from urllib.parse import quote

from minio import Minio

from translate_ai.domain.models import StoredObject
from translate_ai.exceptions import UploadError
from translate_ai.interfaces.storage import StorageClient
from translate_ai.logging import setup_logging

logger = setup_logging()


def public_read_policy(bucket_name: str) -> str:
    """Bucket policy letting anonymous clients download any object."""
    return json.dumps(
        {
            "Version": "2012-10-17",
            "Statement": [
                {
                    "Effect": "Allow",
                    "Principal": {"AWS": ["*"]},
                    "Action": ["s3:GetObject"],
                    "Resource": [f"arn:aws:s3:::{bucket_name}/*"],
                }
            ],
        }
    )


def object_file_name(name: str) -> str:
    """Last path segment of an uploaded name, usable as an object key segment."""
    base = posixpath.basename(name.replace("\\", "/"))
    if base in ("", ".", ".."):
        return "file"
    return base


class MinioStorageClient(StorageClient):
    """Stores files in a public MinIO bucket.

    Every object key gets a random prefix, so storing the same name twice
    produces two objects with distinct URLs.
    """

    def __init__(self, client: Minio, bucket_name: str, public_base_url: str):
        self._client = client
        self._bucket_name = bucket_name
        self._public_base_url = public_base_url.rstrip("/")

    def upload(self, name: str, data: bytes, content_type: str) -> StoredObject:
        object_name = f"{uuid.uuid4().hex}/{object_file_name(name)}"
        try:
            self._client.put_object(
                bucket_name=self._bucket_name,
                object_name=object_name,
                data=io.BytesIO(data),
                length=len(data),
                content_type=content_type,
            )
        except Exception as e:
            logger.exception(
                "MinIO upload failed",
                extra={"bucket_name": self._bucket_name, "object_name": object_name},
            )
            raise UploadError(name, e) from e

        logger.info(
            "File uploaded to MinIO",
            extra={
                "bucket_name": self._bucket_name,
                "object_name": object_name,
                "size": len(data),
            },
        )
        return StoredObject(name=name, url=self.public_url(object_name))

    def public_url(self, object_name: str) -> str:
        return f"{self._public_base_url}/{self._bucket_name}/{quote(object_name)}"

    def ensure_bucket_exists(self) -> None:
        if not self._client.bucket_exists(self._bucket_name):
            self._client.make_bucket(self._bucket_name)
            logger.info("Bucket created", extra={"bucket_name": self._bucket_name})
        else:
            logger.info("Bucket already exists", extra={"bucket_name": self._bucket_name})
        self._client.set_bucket_policy(
            self._bucket_name, public_read_policy(self._bucket_name)
        )
