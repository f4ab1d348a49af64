"""Document stores backing the checklist state.

The engine reads the whole document on load and writes the whole document on
save. Writes go to a temporary sibling file that atomically replaces the
target, so a reader never observes a partial write.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol

from ventureboard.core.errors import StorageError


logger = logging.getLogger(__name__)


class DocumentStore(Protocol):
    """Read-or-fail / write-or-fail storage for a single JSON document."""

    def read(self) -> dict[str, Any] | None:
        """Return the stored document, or None when nothing has been stored yet."""
        ...

    def write(self, document: dict[str, Any]) -> None:
        """Replace the stored document."""
        ...


class JsonFileStore:
    """Store the checklist document as a pretty-printed JSON file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"JsonFileStore({str(self.path)!r})"

    def read(self) -> dict[str, Any] | None:
        """Load the document from disk.

        Returns:
            The parsed document, or None if the file does not exist

        Raises:
            StorageError: If the file cannot be read or is not a JSON object
        """
        if not self.path.exists():
            logger.info("Checklist file not found, starting empty", extra={"path": str(self.path)})
            return None

        try:
            raw = self.path.read_text(encoding="utf-8")
            document = json.loads(raw)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            msg = f"Failed to read checklist file {self.path}: {e}"
            raise StorageError(msg) from e

        if not isinstance(document, dict):
            msg = f"Checklist file {self.path} does not contain a JSON object"
            raise StorageError(msg)

        return document

    def write(self, document: dict[str, Any]) -> None:
        """Write the document atomically.

        Raises:
            StorageError: If the file cannot be written
        """
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                json.dump(document, handle, indent=2, ensure_ascii=False)
                handle.write("\n")
            os.replace(tmp_name, self.path)
            tmp_name = None
        except (OSError, TypeError, ValueError) as e:
            msg = f"Failed to write checklist file {self.path}: {e}"
            raise StorageError(msg) from e
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

        logger.debug("Checklist saved", extra={"path": str(self.path)})
