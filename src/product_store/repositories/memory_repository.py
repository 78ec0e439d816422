"""In-process implementation of KeyValueStore."""

import threading


class InMemoryKeyValueRepository:
    """Dictionary-backed key-value store.

    Selected with PRODUCTS_KV_URL=memory:// for local development, and
    used by the test suite. Contents live only as long as the process.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._data.get(key)

    def put(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def health_check(self) -> bool:
        return True
