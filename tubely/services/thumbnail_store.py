"""
Thumbnail storage on the local assets root.

Each video has at most one thumbnail, stored as ``{video_id}.{ext}`` where the
extension is the subtype of the declared media type (``image/png`` -> ``png``).
The declared media type is kept verbatim in a hidden ``.{video_id}.meta``
sidecar and returned unchanged on load.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class Thumbnail:
    data: bytes
    media_type: str


def extension_for(media_type: str) -> str:
    """Infer a file extension from a media type such as ``image/jpeg``"""
    parts = media_type.split(";")[0].strip().split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ValueError(f"Invalid media type: {media_type!r}")
    return parts[1].lower()


def _write_atomic(path: Path, data: bytes) -> None:
    tmp_path = path.with_name(f".{path.name}.tmp")
    tmp_path.write_bytes(data)
    os.replace(tmp_path, path)


class ThumbnailStore:
    """Key-value store mapping video ids to thumbnail bytes and media type"""

    def __init__(self, assets_root: str):
        self.assets_root = Path(assets_root)

    def _meta_path(self, video_id: str) -> Path:
        return self.assets_root / f".{video_id}.meta"

    def save(self, video_id: str, data: bytes, media_type: str) -> str:
        """
        Store a thumbnail, replacing any previous one. Returns the filename.

        The new file and its metadata are in place before stale files of the
        same video are removed.
        """
        filename = f"{video_id}.{extension_for(media_type)}"
        self.assets_root.mkdir(parents=True, exist_ok=True)

        _write_atomic(self.assets_root / filename, data)
        meta = {"filename": filename, "media_type": media_type}
        _write_atomic(self._meta_path(video_id), json.dumps(meta).encode("utf-8"))

        for old_path in self.assets_root.glob(f"{video_id}.*"):
            if old_path.name != filename:
                old_path.unlink()

        logger.info(f"Stored thumbnail {filename} ({len(data)} bytes, {media_type})")
        return filename

    def load(self, video_id: str) -> Optional[Thumbnail]:
        meta_path = self._meta_path(video_id)
        if not meta_path.exists():
            return None

        meta = json.loads(meta_path.read_text(encoding="utf-8"))
        data_path = self.assets_root / meta["filename"]
        if not data_path.exists():
            logger.warning(f"Thumbnail metadata for {video_id} points at missing {data_path.name}")
            return None

        return Thumbnail(data=data_path.read_bytes(), media_type=meta["media_type"])
