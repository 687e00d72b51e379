"""
Transient result store owned by a single crawl job.

Holds the batches pushed by request handlers until the job reads them,
then is dropped. Nothing is written to disk.
"""

from typing import Any, Dict, List


class ResultStore:
    """In-memory dataset for one crawl job."""

    def __init__(self, name: str):
        self.name = name
        self._items: List[Dict[str, Any]] = []
        self._dropped = False

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.drop()

    @property
    def is_dropped(self) -> bool:
        return self._dropped

    def push_data(self, item: Dict[str, Any]):
        """Append one batch to the store."""
        self._check_open()
        self._items.append(item)

    def get_data(self) -> List[Dict[str, Any]]:
        """Return all batches in push order."""
        self._check_open()
        return list(self._items)

    def drop(self):
        """Discard all stored batches. Safe to call more than once."""
        if self._dropped:
            return
        self._items.clear()
        self._dropped = True
        print(f"Dropped result store {self.name}")

    def _check_open(self):
        if self._dropped:
            raise RuntimeError(f"Result store {self.name} has been dropped")

    def __len__(self) -> int:
        return len(self._items)
