"""Core type definitions."""

from typing import NewType

# Output path with leading slash (e.g., "/guide/setup.html")
# Distinct from source paths found in the tree
URLPath = NewType("URLPath", str)
