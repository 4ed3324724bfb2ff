"""Tests for translation jobs and the request builder."""

import base64
from pathlib import Path

import pytest

from image_translator.errors import ImageIOError
from image_translator.translation import TranslationJob, build_translate_request
from image_translator.translation.request import TranslateRequest, encode_image


class TestBuildTranslateRequest:
    """Tests for build_translate_request."""

    def test_encodes_image(self, tmp_path):
        """Test the file content is base64-encoded into the request."""
        image = tmp_path / "page.png"
        image.write_bytes(b"\x89PNG\r\n\x1a\nrest")

        request = build_translate_request(image, "fp", "uuid")

        assert request.fingerprint == "fp"
        assert request.client_uuid == "uuid"
        assert len(request.base64_images) == 1
        assert base64.b64decode(request.base64_images[0]) == b"\x89PNG\r\n\x1a\nrest"

    def test_wire_format(self, tmp_path):
        """Test the JSON representation uses camelCase keys."""
        image = tmp_path / "page.jpg"
        image.write_bytes(b"abc")

        body = build_translate_request(image, "fp", "uuid").to_json()

        assert body == {
            "fingerprint": "fp",
            "clientUuid": "uuid",
            "base64Images": ["YWJj"],
        }

    def test_missing_file(self, tmp_path):
        """Test an unreadable source raises ImageIOError."""
        missing = tmp_path / "missing.jpg"

        with pytest.raises(ImageIOError) as exc_info:
            build_translate_request(missing, "fp", "uuid")

        assert exc_info.value.path == missing
        assert "missing.jpg" in str(exc_info.value)

    def test_empty_file(self, tmp_path):
        """Test an empty file encodes to an empty string."""
        image = tmp_path / "empty.jpg"
        image.write_bytes(b"")
        assert encode_image(image) == ""

    def test_requests_are_independent(self, tmp_path):
        """Test each call builds a new request value."""
        image = tmp_path / "page.jpg"
        image.write_bytes(b"abc")

        first = build_translate_request(image, "fp", "uuid")
        second = build_translate_request(image, "fp", "uuid")

        assert first == second
        assert first is not second
        assert first.base64_images is not second.base64_images


class TestTranslationJob:
    """Tests for TranslationJob."""

    def test_coerce_tuple(self):
        """Test string pairs are converted to paths."""
        job = TranslationJob.coerce(("in.jpg", "out.json"))
        assert job == TranslationJob(Path("in.jpg"), Path("out.json"))

    def test_coerce_job(self):
        """Test an existing job is returned unchanged."""
        job = TranslationJob(Path("a"), Path("b"))
        assert TranslationJob.coerce(job) is job

    def test_immutable(self):
        """Test jobs cannot be modified."""
        job = TranslationJob(Path("a"), Path("b"))
        with pytest.raises(AttributeError):
            job.source = Path("c")


class TestTranslateRequest:
    """Tests for TranslateRequest."""

    def test_to_json_copies_images(self):
        """Test the wire dict does not share the image list."""
        request = TranslateRequest("fp", "uuid", ["x"])
        body = request.to_json()
        body["base64Images"].append("y")
        assert request.base64_images == ["x"]
