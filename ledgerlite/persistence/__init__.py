"""Mini README: Persistence layer keeping the ledger across restarts.

Exports the blob store implementations and the write-through bridge that
loads the store at startup and saves it after every mutation.
"""

from .blob_store import BlobStore, FileBlobStore, MemoryBlobStore
from .bridge import DEFAULT_STORAGE_KEY, LoadReport, PersistenceBridge
from .codec import decode_transactions, encode_transactions

__all__ = [
    "BlobStore",
    "DEFAULT_STORAGE_KEY",
    "FileBlobStore",
    "LoadReport",
    "MemoryBlobStore",
    "PersistenceBridge",
    "decode_transactions",
    "encode_transactions",
]
