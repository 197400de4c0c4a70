"""Blob storage for profile pictures (S3 / MinIO, or the local filesystem)."""

from __future__ import annotations

import logging
import mimetypes
import re
import uuid
from abc import abstractmethod
from pathlib import Path
from typing import Protocol

import boto3
from botocore.client import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ClientError

from app.core.config import settings
from app.core.errors import StorageError
from app.schemas.user import ProfilePictureUpload

LOGGER = logging.getLogger(__name__)

_SAFE_SUFFIX = re.compile(r"^\.[A-Za-z0-9]{1,8}$")


def build_object_key(owner_id: str, upload: ProfilePictureUpload) -> str:
    """``profile-pictures/<owner>/<random>.<ext>``; extension from the name or MIME type."""
    suffix = Path(upload.filename or "").suffix.lower()
    if not _SAFE_SUFFIX.match(suffix):
        suffix = mimetypes.guess_extension(upload.content_type) or ".img"
    return f"profile-pictures/{owner_id}/{uuid.uuid4().hex}{suffix}"


class BlobStore(Protocol):
    """Stores a file and returns a URL it can be fetched from."""

    @abstractmethod
    def upload(self, owner_id: str, upload: ProfilePictureUpload) -> str:
        """Store the file.

        Raises:
            StorageError: If the backend write fails.
        """
        ...


class S3BlobStore(BlobStore):
    def __init__(
        self,
        *,
        endpoint_url: str | None,
        public_url: str | None,
        region_name: str,
        bucket_name: str,
        access_key: str,
        secret_key: str,
    ) -> None:
        self._bucket_name = bucket_name
        self._public_url = (public_url or endpoint_url or f"https://{bucket_name}.s3.amazonaws.com").rstrip("/")
        self._path_style = public_url is not None or endpoint_url is not None
        self._client = boto3.client(
            "s3",
            endpoint_url=endpoint_url,
            region_name=region_name,
            aws_access_key_id=access_key or None,
            aws_secret_access_key=secret_key or None,
            config=BotoConfig(
                signature_version="s3v4", s3={"addressing_style": "path"}
            ),
        )

    def upload(self, owner_id: str, upload: ProfilePictureUpload) -> str:
        object_key = build_object_key(owner_id, upload)
        try:
            self._client.put_object(
                Bucket=self._bucket_name,
                Key=object_key,
                Body=upload.data,
                ContentType=upload.content_type,
            )
        except (BotoCoreError, ClientError) as exc:
            LOGGER.exception("Profile picture upload failed for %s", owner_id)
            raise StorageError("프로필 사진 업로드에 실패했습니다.") from exc

        if self._path_style:
            return f"{self._public_url}/{self._bucket_name}/{object_key}"
        return f"{self._public_url}/{object_key}"


class LocalBlobStore(BlobStore):
    """Writes under ``root`` and serves from ``base_url`` (mounted by the app)."""

    def __init__(self, *, root: Path, base_url: str) -> None:
        self._root = Path(root)
        self._base_url = base_url.rstrip("/")

    def upload(self, owner_id: str, upload: ProfilePictureUpload) -> str:
        object_key = build_object_key(owner_id, upload)
        target = self._root / object_key
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(upload.data)
        except OSError as exc:
            LOGGER.exception("Profile picture write failed for %s", owner_id)
            raise StorageError("프로필 사진 업로드에 실패했습니다.") from exc
        return f"{self._base_url}/{object_key}"


def get_blob_store() -> BlobStore:
    """Pick the backend from settings."""
    if settings.STORAGE_BACKEND == "s3":
        return S3BlobStore(
            endpoint_url=settings.S3_ENDPOINT_URL,
            public_url=settings.S3_PUBLIC_URL,
            region_name=settings.S3_REGION,
            bucket_name=settings.S3_BUCKET,
            access_key=settings.S3_ACCESS_KEY,
            secret_key=settings.S3_SECRET_KEY,
        )
    return LocalBlobStore(root=settings.MEDIA_ROOT, base_url=settings.MEDIA_URL)
