"""Translation jobs and the outbound translate request."""

import base64
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from ..errors import ImageIOError


@dataclass(frozen=True)
class TranslationJob:
    """A source image and the path its translation is written to.

    Attributes:
        source: Path of the image to translate.
        destination: Path the translated result is written to.
    """
    source: Path
    destination: Path

    @classmethod
    def coerce(cls, value: Union["TranslationJob", tuple]) -> "TranslationJob":
        """Accept either a job or a ``(source, destination)`` pair."""
        if isinstance(value, cls):
            return value
        source, destination = value
        return cls(source=Path(source), destination=Path(destination))


@dataclass
class TranslateRequest:
    """Body of a request to the translate endpoint.

    Attributes:
        fingerprint: Client device identifier.
        client_uuid: Client instance identifier.
        base64_images: Base64-encoded images to translate.
    """
    fingerprint: str
    client_uuid: str
    base64_images: list[str]

    def to_json(self) -> dict[str, Any]:
        """Return the JSON-serializable wire representation."""
        return {
            "fingerprint": self.fingerprint,
            "clientUuid": self.client_uuid,
            "base64Images": list(self.base64_images),
        }


def encode_image(path: Path) -> str:
    """Read an image file and return its base64 encoding.

    Raises:
        ImageIOError: If the file cannot be read.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise ImageIOError(f"cannot read {path}: {e}", path=Path(path)) from e
    return base64.b64encode(data).decode('ascii')


def build_translate_request(
    source: Path,
    fingerprint: str,
    client_uuid: str
) -> TranslateRequest:
    """Build the translate request for a single source image.

    Args:
        source: Path of the image to upload.
        fingerprint: Client device identifier.
        client_uuid: Client instance identifier.

    Returns:
        A new TranslateRequest holding the encoded image.

    Raises:
        ImageIOError: If the image cannot be read.
    """
    return TranslateRequest(
        fingerprint=fingerprint,
        client_uuid=client_uuid,
        base64_images=[encode_image(source)]
    )
