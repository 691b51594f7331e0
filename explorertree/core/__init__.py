"""Core tree model for explorertree.

This package contains the node variants and the ordered collection that
holds a folder's children.
"""

from .children import Children, canonical_key
from .node import Node, NodeType
from .file import File
from .folder import Folder

__all__ = [
    "Children",
    "canonical_key",
    "Node",
    "NodeType",
    "File",
    "Folder",
]
