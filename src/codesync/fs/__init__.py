from codesync.fs.local import LocalDirectory, LocalEntry
from codesync.fs.memory import InMemoryDirectory, InMemoryEntry

__all__ = [
    "InMemoryDirectory",
    "InMemoryEntry",
    "LocalDirectory",
    "LocalEntry",
]
