"""Infrastructure layer: concrete implementations of application ports."""

from addrbook.infrastructure.flat_file import FlatFileCodec
from addrbook.infrastructure.memory_store import InMemoryContactStore
from addrbook.infrastructure.phone import format_phone

__all__ = [
    "FlatFileCodec",
    "InMemoryContactStore",
    "format_phone",
]
