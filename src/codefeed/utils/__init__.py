"""Utility modules for codefeed."""

from .file_filter import FileFilter
from .path_utils import PathUtils
from .tree_builder import TreeRenderer

__all__ = ["FileFilter", "PathUtils", "TreeRenderer"]
