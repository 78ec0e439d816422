"""Protocol interfaces for swappable implementations.

Protocols use structural typing so the service layer can run against
Redis in production and an in-process dictionary in tests.
"""

from .key_value_store import KeyValueStore

__all__ = [
    "KeyValueStore",
]
