"""
Persistence adapters.

These modules encapsulate how data is stored/retrieved (today whole JSON
documents). Stores depend on the adapter rather than touching files.
"""
