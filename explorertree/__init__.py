"""explorertree - Observable file/folder tree for explorer UIs.

explorertree models the state behind an editor's project tree: folders
and files that can be moved, renamed, selected, opened, focused and
expanded, with every change announced to listeners anywhere in the tree.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from explorertree import Folder, File

    root = Folder.create_root()
    src = Folder("src")
    src.parent = root
    main = File("main.py")
    main.parent = src

    root.changes.on("descendant:name", lambda event: print(event.source.path))
    main.name = "app.py"          # prints "src/app.py"
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

import logging

__version__ = "0.1.0"

from .config import ExplorerConfig, get_config, configure, reset_config
from .errors import (
    ExplorerError,
    NameConflictError,
    StructuralViolationError,
    ConfigurationError,
)
from .core import Children, Node, NodeType, File, Folder
from .events import ChangeBus, ChangeEvent, ChangeKind, Relation

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Config
    "ExplorerConfig",
    "get_config",
    "configure",
    "reset_config",
    # Errors
    "ExplorerError",
    "NameConflictError",
    "StructuralViolationError",
    "ConfigurationError",
    # Model
    "Children",
    "Node",
    "NodeType",
    "File",
    "Folder",
    # Events
    "ChangeBus",
    "ChangeEvent",
    "ChangeKind",
    "Relation",
]
