"""Key-value store protocol.

Defines the interface for the backing store that holds the product
collection as a single serialized blob.

Implementations can include:
- Redis (default)
- In-process dictionary (local development and tests)
- Any other store with plain get/put semantics
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Protocol for key-value store backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.

    Example:
        ```python
        from product_store.protocols import KeyValueStore

        store: KeyValueStore = RedisKeyValueRepository.create()
        store: KeyValueStore = InMemoryKeyValueRepository()
        ```
    """

    def get(self, key: str) -> str | None:
        """Read the value stored under a key.

        Args:
            key: The record key

        Returns:
            The stored text, or None if the key is absent
        """
        ...

    def put(self, key: str, value: str) -> None:
        """Overwrite the value stored under a key.

        Args:
            key: The record key
            value: The serialized value to store
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
