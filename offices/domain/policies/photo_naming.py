"""PhotoNamingPolicy — derive the object name an office photo is stored under."""

from __future__ import annotations

import uuid
from pathlib import PurePosixPath, PureWindowsPath
from uuid import UUID


def new_upload_id() -> str:
    """Short random token that tells two uploads of the same file apart."""
    return uuid.uuid4().hex[:12]


def photo_blob_name(
    office_id: UUID, filename: str | None = None, upload_id: str | None = None
) -> str:
    """Build the blob name ``"{office_id}_{upload_id}_{filename}"``.

    Only the base name of ``filename`` is kept, so client-side paths never
    leak into the bucket layout. Parts that are missing are left out, down
    to just the office id. Every upload gets its own ``upload_id``, so a
    replaced photo never keeps the URL of the one it replaced.
    """
    parts = [str(office_id)]
    if upload_id:
        parts.append(upload_id)
    base = _base_name(filename)
    if base:
        parts.append(base)
    return "_".join(parts)


def _base_name(filename: str | None) -> str:
    if not filename:
        return ""
    # Browsers on Windows may send the full client path.
    name = PureWindowsPath(PurePosixPath(filename).name).name
    return name.replace("\x00", "").strip()
