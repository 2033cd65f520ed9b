"""Repository for file I/O operations."""

import logging
from pathlib import Path

from learnflow.utils import unique_filename

logger = logging.getLogger(__name__)


class FileRepository:
    """Repository for uploaded resource files (question papers, study notes)."""

    def __init__(self, uploads_dir: Path) -> None:
        self.uploads_dir = uploads_dir

    def save(self, subdirectory: str, content: bytes, filename: str) -> str:
        """
        Save an uploaded file under a unique name.

        Args:
            subdirectory: Folder below the uploads root, e.g. ``question-papers``
            content: File content as bytes
            filename: Client supplied filename

        Returns:
            Path of the saved file relative to the uploads root
        """
        directory = self.uploads_dir / subdirectory
        directory.mkdir(parents=True, exist_ok=True)
        stored_name = unique_filename(filename)
        file_path = directory / stored_name
        file_path.write_bytes(content)
        logger.info(f"Saved upload: {file_path}")
        return f"{subdirectory}/{stored_name}"

    def delete(self, relative_path: str) -> bool:
        """
        Delete a stored upload.

        Paths that do not point inside the uploads root (seeded sample links,
        absolute URLs) are ignored.

        Returns:
            True if a file was deleted, False otherwise
        """
        if relative_path.startswith(("/", "http://", "https://")):
            return False

        root = self.uploads_dir.resolve()
        file_path = (root / relative_path).resolve()
        if not file_path.is_relative_to(root):
            logger.warning(f"Refusing to delete file outside uploads dir: {relative_path}")
            return False
        if not file_path.exists():
            logger.info(f"No file found at {file_path}")
            return False

        try:
            file_path.unlink()
            logger.info(f"Deleted upload: {file_path}")
            return True
        except OSError as e:
            logger.error(f"Failed to delete upload {file_path}: {e!s}")
            return False
