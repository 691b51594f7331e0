"""Configuration system for explorertree.

This module defines the knobs that shape how a tree names, orders and
guards its nodes. A single active configuration is shared by every tree
in the process; use ``configure()`` to change it and ``reset_config()``
to go back to the defaults.
"""

from dataclasses import dataclass, replace
from typing import List, Optional

from .errors import ConfigurationError


@dataclass(frozen=True)
class ExplorerConfig:
    """Complete configuration for explorer trees.

    The defaults match what a typical editor project tree expects:
    ``::root::`` as the reserved root name, ``/`` between path segments
    and ``:`` between the relation and kind of an event name.
    """

    # Naming
    root_name: str = "::root::"   # Reserved name of the root folder
    separator: str = "/"          # Appended to folder paths

    # Events
    delimiter: str = ":"          # Splits "child:name" into segments

    # Ordering
    locale_sort: bool = True      # Break casefold ties with locale.strxfrm
    auto_sort: bool = False       # Re-sort children after attach/rename

    # Safety
    guard_cycles: bool = True     # Reject parent assignments that form a cycle

    @classmethod
    def sorted_tree(cls) -> 'ExplorerConfig':
        """Create config that keeps every folder's children in display order.

        Returns:
            ExplorerConfig with auto_sort enabled
        """
        return cls(auto_sort=True)

    @classmethod
    def fast(cls) -> 'ExplorerConfig':
        """Create config that skips the cycle check on reparenting.

        Only safe when callers never move a folder under itself.

        Returns:
            ExplorerConfig with guard_cycles disabled
        """
        return cls(guard_cycles=False)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not self.separator:
            errors.append("separator cannot be empty")
        if not self.delimiter:
            errors.append("delimiter cannot be empty")
        if self.separator and self.separator == self.delimiter:
            errors.append("separator and delimiter must differ")

        if not self.root_name:
            errors.append("root_name cannot be empty")
        elif self.separator and self.separator in self.root_name:
            errors.append("root_name cannot contain the separator")

        return errors


_active = ExplorerConfig()


def get_config() -> ExplorerConfig:
    """Return the configuration currently in effect."""
    return _active


def configure(config: Optional[ExplorerConfig] = None, **overrides) -> ExplorerConfig:
    """Install a new active configuration.

    Args:
        config: Base configuration (defaults to the active one)
        **overrides: Field values replacing those of ``config``

    Returns:
        The configuration now in effect

    Raises:
        ConfigurationError: If the resulting configuration is invalid
    """
    global _active

    new_config = replace(config or _active, **overrides)
    errors = new_config.validate()
    if errors:
        raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}")

    _active = new_config
    return _active


def reset_config() -> ExplorerConfig:
    """Restore the default configuration."""
    global _active
    _active = ExplorerConfig()
    return _active
