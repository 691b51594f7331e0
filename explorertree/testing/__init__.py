"""Testing utilities for explorertree consumers."""

from .fixtures import EventRecorder, build_tree, walk

__all__ = ['EventRecorder', 'build_tree', 'walk']
