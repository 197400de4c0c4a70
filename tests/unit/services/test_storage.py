"""Tests for profile picture storage."""

import logging

import pytest

from app.core.errors import StorageError
from app.schemas.user import ProfilePictureUpload
from app.services.storage import LocalBlobStore, build_object_key


def _upload(filename="me.PNG", content_type="image/png", data=b"\x89PNG"):
    return ProfilePictureUpload(filename=filename, content_type=content_type, data=data)


class TestBuildObjectKey:

    def test_layout(self):
        key = build_object_key("u-1", _upload())
        prefix, owner, name = key.split("/")
        assert prefix == "profile-pictures"
        assert owner == "u-1"
        assert name.endswith(".png")

    def test_unique(self):
        assert build_object_key("u-1", _upload()) != build_object_key("u-1", _upload())

    def test_extension_from_mime_type(self):
        assert build_object_key("u-1", _upload(filename="camera-upload", content_type="image/jpeg")).endswith(".jpg")

    @pytest.mark.parametrize("filename", ["../../etc/passwd", "photo.", "a.ext with space"])
    def test_odd_filenames_never_leak_into_key(self, filename):
        key = build_object_key("u-1", _upload(filename=filename, content_type="application/x-unknown"))
        assert key.endswith(".img")
        assert ".." not in key


class TestLocalBlobStore:

    def test_writes_file_and_returns_url(self, tmp_path):
        store = LocalBlobStore(root=tmp_path, base_url="/media/")
        url = store.upload("u-1", _upload())

        assert url.startswith("/media/profile-pictures/u-1/")
        stored = tmp_path / url.removeprefix("/media/")
        assert stored.read_bytes() == b"\x89PNG"

    def test_unwritable_root(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        store = LocalBlobStore(root=blocker, base_url="/media")
        with pytest.raises(StorageError):
            store.upload("u-1", _upload())

    def test_write_failure_logged_with_traceback(self, tmp_path, caplog):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        store = LocalBlobStore(root=blocker, base_url="/media")

        with caplog.at_level(logging.ERROR, logger="app.services.storage"):
            with pytest.raises(StorageError):
                store.upload("u-1", _upload())

        record = caplog.records[-1]
        assert "u-1" in record.getMessage()
        assert record.exc_info is not None
