"""Key insertion filters applied before accepting an upload."""

from .base import KeyInsertionFilter
from .future import FutureKeyFilter, RemoveKeysFromFuture

__all__ = ["KeyInsertionFilter", "RemoveKeysFromFuture", "FutureKeyFilter"]
