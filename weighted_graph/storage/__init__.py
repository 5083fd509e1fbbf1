from weighted_graph.storage.base import BaseStorage
from weighted_graph.storage.memory import MemoryStorage

__all__ = ["BaseStorage", "MemoryStorage"]
