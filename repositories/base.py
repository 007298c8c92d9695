"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
Each repository owns one flat JSON file holding a top-level array.
"""

import json
import logging
from abc import ABC
from pathlib import Path
from typing import Any, List, Union

from app.exceptions import StorageError

logger = logging.getLogger("foodorder.repositories")


class JsonFileRepository(ABC):
    """
    Base repository providing whole-file read and write of a JSON array.
    All repositories should inherit from this class.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read_all(self) -> List[Any]:
        """
        Load and parse the backing file.

        Returns:
            The decoded top-level array

        Raises:
            StorageError: If the file is missing, unreadable, not valid JSON,
                or does not hold an array
        """
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise StorageError("Data file does not exist", path=str(self.path)) from e
        except OSError as e:
            raise StorageError(f"Data file could not be read: {e}", path=str(self.path)) from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StorageError(f"Data file is not valid JSON: {e}", path=str(self.path)) from e

        if not isinstance(data, list):
            raise StorageError(
                f"Data file holds {type(data).__name__}, expected an array",
                path=str(self.path),
            )
        return data

    def _write_all(self, entries: List[Any]) -> None:
        """Serialize the full array back to the backing file."""
        # Serialize before opening so a bad entry never truncates the file
        try:
            content = json.dumps(entries, indent=2)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Entries are not JSON serializable: {e}", path=str(self.path)) from e
        try:
            self.path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Data file could not be written: {e}", path=str(self.path)) from e
        logger.debug("Wrote %d entries to %s", len(entries), self.path)
