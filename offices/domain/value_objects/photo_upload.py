"""PhotoUpload value object — an inbound photo stream with its metadata."""

from dataclasses import dataclass
from typing import BinaryIO


@dataclass(frozen=True)
class PhotoUpload:
    stream: BinaryIO
    content_type: str
    filename: str | None = None

    def close(self) -> None:
        self.stream.close()
