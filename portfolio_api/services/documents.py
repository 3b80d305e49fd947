# portfolio_api/services/documents.py
import json
import os
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Iterator

from portfolio_api.core.logging import logger


class JsonDocument:
    """
    One pretty-printed JSON file holding a whole collection (or a singleton).

    A missing or unreadable file is not an error: readers get
    ``default_factory()`` instead, and so is a document whose top-level value
    is not an instance of ``expected_type``. Every read-modify-write goes through
    ``transaction()``, which holds a re-entrant lock for its whole duration
    so that concurrent requests in this process cannot lose each other's
    updates. Writes go to a temporary file that is then renamed over the
    target, so a crash never leaves a half-written document behind.
    """

    def __init__(self, path: os.PathLike, default_factory: Callable[[], Any], expected_type: type = list):
        self.path = Path(path)
        self.default_factory = default_factory
        self.expected_type = expected_type
        self.lock = threading.RLock()

    def read(self) -> Any:
        with self.lock:
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except FileNotFoundError:
                logger.debug(f"No saved document at {self.path}, using defaults")
                return self.default_factory()
            except (OSError, ValueError) as e:
                logger.warning(f"Unreadable document at {self.path}, using defaults: {str(e)}")
                return self.default_factory()

            if not isinstance(data, self.expected_type):
                logger.warning(
                    f"Document at {self.path} holds {type(data).__name__}, "
                    f"expected {self.expected_type.__name__}; using defaults"
                )
                return self.default_factory()
            return data

    def write(self, data: Any) -> None:
        with self.lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_name(self.path.name + ".tmp")
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self.path)

    @contextmanager
    def transaction(self) -> Iterator[Any]:
        """Yield the current contents for in-place mutation, then persist them."""
        with self.lock:
            data = self.read()
            yield data
            self.write(data)


def next_id(records: list) -> int:
    """Current max id + 1, or 1 for an empty collection."""
    return max((record["id"] for record in records), default=0) + 1
