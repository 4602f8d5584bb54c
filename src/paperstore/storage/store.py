"""Directory-backed data file store."""

import logging
import os
import shutil
from pathlib import Path

from paperstore.storage.errors import (
    InvalidName,
    IoFailure,
    PathEscapesRoot,
    RootUnavailable,
    SourceMissing,
)

logger = logging.getLogger(__name__)


class DataFileStore:
    """File store scoped to a single root directory.

    Every name is resolved as ``root / name`` and must stay inside the
    root. The filesystem is the only source of truth: there is no index,
    and listing walks the directory tree on demand.
    """

    def __init__(self, root: Path | str):
        self.root = Path(root)

    def root_path(self) -> Path:
        """Return the absolute root, creating it if it does not exist yet."""
        try:
            if not self.root.exists():
                self.root.mkdir(parents=True, exist_ok=True)
            return self.root.resolve()
        except (OSError, ValueError) as e:
            raise RootUnavailable(f"Failed to create data dir: {e}") from e

    def path_for(self, name: str) -> Path:
        """Resolve a relative name to an absolute path inside the root.

        Raises:
            InvalidName: if the name is empty or resolves to the root itself
            PathEscapesRoot: if the name resolves outside the root
        """
        if not name or not name.strip() or "\x00" in name:
            raise InvalidName(f"Invalid filename: {name!r}")

        root = self.root_path()
        try:
            path = (root / name).resolve()
        except (OSError, ValueError) as e:
            raise InvalidName(f"Invalid filename: {name!r}: {e}") from e
        if path == root:
            raise InvalidName(f"Invalid filename: {name!r}")
        if not path.is_relative_to(root):
            raise PathEscapesRoot(f"Path '{name}' escapes the data dir")
        return path

    # Copy policies

    def copy_in(self, source_path: Path | str) -> str:
        """Flatten-copy a file into the root under its own basename.

        Args:
            source_path: Absolute path of the file to copy

        Returns:
            The stored file name
        """
        source = Path(source_path)
        if not _exists(source):
            raise SourceMissing(f"Source file does not exist: {source_path}")

        filename = source.name
        if not filename:
            raise InvalidName(f"Invalid filename: {source_path}")

        dest = self.path_for(filename)
        try:
            shutil.copyfile(source, dest)
        except OSError as e:
            raise IoFailure(f"Failed to copy file: {e}") from e

        logger.debug(f"Copied {source} -> {dest}")
        return filename

    def copy_to(self, source_path: Path | str, name: str) -> Path:
        """Path-preserving copy: replicate a file at ``root / name``.

        Intermediate directories are created as needed.

        Returns:
            Absolute destination path
        """
        source = Path(source_path)
        if not _exists(source):
            raise SourceMissing(f"Source file does not exist: {source_path}")

        dest = self.path_for(name)
        self._ensure_parent(dest)
        try:
            shutil.copyfile(source, dest)
        except OSError as e:
            raise IoFailure(f"Failed to copy file '{name}': {e}") from e
        return dest

    # Reads

    def read_text(self, name: str) -> str:
        """Read a stored file as UTF-8 text."""
        path = self.path_for(name)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise IoFailure(f"Failed to read file '{name}': {e}") from e

    def read_binary(self, name: str) -> bytes:
        """Read a stored file as raw bytes."""
        path = self.path_for(name)
        try:
            return path.read_bytes()
        except OSError as e:
            raise IoFailure(f"Failed to read binary file '{name}': {e}") from e

    # Writes

    def write(self, name: str, content: str) -> None:
        """Write text to a stored file, creating subdirectories as needed."""
        path = self.path_for(name)
        self._ensure_parent(path)
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise IoFailure(f"Failed to write file '{name}': {e}") from e

    def write_binary(self, name: str, data: bytes) -> None:
        """Write raw bytes to a stored file, creating subdirectories as needed."""
        path = self.path_for(name)
        self._ensure_parent(path)
        try:
            path.write_bytes(data)
        except OSError as e:
            raise IoFailure(f"Failed to write file '{name}': {e}") from e

    # Queries

    def exists(self, name: str) -> bool:
        """Check whether a stored file exists.

        Only root resolution failures raise; unusable names report False.
        """
        try:
            path = self.path_for(name)
        except (InvalidName, PathEscapesRoot):
            return False
        return _exists(path)

    def delete(self, name: str) -> None:
        """Delete a stored file. Deleting a missing file is a no-op."""
        path = self.path_for(name)
        if not _exists(path):
            return
        try:
            path.unlink()
        except OSError as e:
            raise IoFailure(f"Failed to delete file: {e}") from e

    def list_files(self) -> list[str]:
        """List every regular file under the root, recursively.

        Returns:
            Paths relative to the root with '/' separators, sorted
        """
        root = self.root_path()

        def _on_error(err: OSError) -> None:
            raise IoFailure(f"Failed to read directory: {err}") from err

        files = []
        for dirpath, _, filenames in os.walk(root, onerror=_on_error):
            for filename in filenames:
                full_path = Path(dirpath) / filename
                if not full_path.is_file():
                    continue
                files.append(full_path.relative_to(root).as_posix())
        return sorted(files)

    @staticmethod
    def _ensure_parent(path: Path) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise IoFailure(f"Failed to create directory: {e}") from e


def _exists(path: Path) -> bool:
    # Names the OS cannot represent (too long, NUL bytes) do not exist
    try:
        return path.exists()
    except (OSError, ValueError):
        return False
