"""
Entity store module for the Game Reviews API
"""

from .loader import DatasetError, build_store, find_dangling_references, load_dataset
from .models import AuthorRecord, GameRecord, ReviewRecord
from .store import EntityStore

__all__ = [
    "AuthorRecord",
    "DatasetError",
    "EntityStore",
    "GameRecord",
    "ReviewRecord",
    "build_store",
    "find_dangling_references",
    "load_dataset",
]
