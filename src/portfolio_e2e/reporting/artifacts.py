"""Per-test artifact sink.

Attachments (step notes, screenshots) are written under
``<root_dir>/<test name>/`` with a sequence prefix so the directory listing
reads in the order things happened.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime
from pathlib import Path

import structlog
from pydantic import BaseModel, Field

logger = structlog.get_logger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]+")


def sanitize_name(name: str) -> str:
    """File-system safe version of a test or attachment name."""
    cleaned = _UNSAFE_CHARS.sub("_", name).strip("_.")
    return cleaned or "unnamed"


class Attachment(BaseModel):
    """A single attachment written by the reporter."""

    name: str
    path: Path
    media_type: str
    size: int = Field(ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class ArtifactReporter:
    """Writes named text and binary attachments for one test.

    Usage:
        reporter = ArtifactReporter(Path("test-results"), "test_journey[johndoe]")
        reporter.attach_text("Login Info", "User: John Doe")
        reporter.attach_bytes("Screenshot", png, extension="png")
    """

    def __init__(self, root_dir: Path, test_name: str) -> None:
        self.test_name = test_name
        self.directory = Path(root_dir) / sanitize_name(test_name)
        self.attachments: list[Attachment] = []

    def _write(self, name: str, data: bytes, extension: str, media_type: str) -> Attachment:
        self.directory.mkdir(parents=True, exist_ok=True)
        filename = f"{len(self.attachments) + 1:02d}_{sanitize_name(name)}.{extension}"
        path = self.directory / filename
        path.write_bytes(data)

        attachment = Attachment(name=name, path=path, media_type=media_type, size=len(data))
        self.attachments.append(attachment)
        logger.debug("attachment_written", test=self.test_name, name=name, path=str(path))
        return attachment

    def attach_text(self, name: str, content: str) -> Attachment:
        return self._write(name, content.encode("utf-8"), "txt", "text/plain")

    def attach_bytes(
        self,
        name: str,
        data: bytes,
        extension: str = "bin",
        media_type: str = "application/octet-stream",
    ) -> Attachment:
        return self._write(name, data, extension, media_type)

    def attach_screenshot(self, name: str, png: bytes) -> Attachment:
        return self.attach_bytes(name, png, extension="png", media_type="image/png")

    def names(self) -> list[str]:
        return [attachment.name for attachment in self.attachments]
