"""
Local storage for public user files
"""
import uuid
from pathlib import Path
from typing import Optional
from wikilens.core.settings import settings
import logging

logger = logging.getLogger(__name__)


def get_file_extension(filename: Optional[str]) -> str:
    """Get file extension"""
    if not filename or "." not in filename:
        return ""
    return f".{filename.rsplit('.', 1)[-1].lower()}"


class PublicStorage:
    """Stores files below a public root, addressed by relative path"""

    def __init__(self, root: str | Path | None = None):
        self.root = Path(root or settings.storage_dir)

    def path_for(self, relative_path: str) -> Path:
        path = (self.root / relative_path).resolve()
        if not path.is_relative_to(self.root.resolve()):
            raise ValueError(f"Path escapes storage root: {relative_path}")
        return path

    def put(self, directory: str, content: bytes, filename: Optional[str] = None) -> str:
        """Write content under directory with a random name and return its relative path"""
        relative_path = f"{directory}/{uuid.uuid4().hex}{get_file_extension(filename)}"
        path = self.path_for(relative_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        logger.info(f"Stored file {relative_path}")
        return relative_path

    def delete(self, relative_path: str) -> bool:
        path = self.path_for(relative_path)
        if not path.exists():
            logger.warning(f"File to delete not found: {relative_path}")
            return False
        path.unlink()
        logger.info(f"Deleted file {relative_path}")
        return True

    def exists(self, relative_path: str) -> bool:
        return self.path_for(relative_path).exists()
