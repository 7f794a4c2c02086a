"""
High-level use cases for the Pals & Elements API.

Each store orchestrates a JSON document adapter to implement the CRUD rules
(identifier assignment, presence checks, lookups). Routers call these stores
instead of manipulating the JSON files directly.
"""

from .element_store import ElementStore
from .pal_store import PalStore

__all__ = ["ElementStore", "PalStore"]
