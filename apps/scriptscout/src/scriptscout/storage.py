"""User file storage."""

import logging
from pathlib import Path
from typing import Protocol

from .models import FileEntry, User

logger = logging.getLogger(__name__)

LATEST_REVISION = -1


class FileStore(Protocol):
    """Read access to files stored per user."""

    def get_one(self, user: User, path: str, revision: int = LATEST_REVISION) -> FileEntry | None:
        """Return the file at revision, or None if it does not exist."""
        ...


class LocalFileStore:
    """
    Directory-backed store: <root>/<user_id>/<path>.

    Keeps only the working copy, so LATEST_REVISION (and revision 0, the
    only revision a plain file has) are the sole readable revisions.
    """

    def __init__(self, root: str | Path):
        self.root = Path(root).resolve()
        logger.debug("Local file store at %s", self.root)

    def _resolve(self, user: User, path: str) -> Path:
        user_dir = (self.root / user.user_id).resolve()
        target = (user_dir / path).resolve()
        if not user_dir.is_relative_to(self.root) or user_dir == self.root:
            raise ValueError(f"Invalid user id: {user.user_id!r}")
        if not target.is_relative_to(user_dir):
            raise ValueError(f"Path escapes user directory: {path!r}")
        return target

    def get_one(self, user: User, path: str, revision: int = LATEST_REVISION) -> FileEntry | None:
        target = self._resolve(user, path)
        if revision not in (LATEST_REVISION, 0):
            logger.debug("Revision %d not available for %s", revision, target)
            return None
        if not target.is_file():
            logger.debug("File not found: %s", target)
            return None
        return FileEntry(
            path=path,
            content=target.read_text(encoding="utf-8"),
            revision=0,
        )
