"""
Persistence adapters.

These modules encapsulate how data is stored/retrieved (today whole JSON
documents on disk). Services depend on the store object rather than touching
the JSON files.
"""
