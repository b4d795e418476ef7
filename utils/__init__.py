"""Utility modules for member ordering checks."""

from .file_utils import FileCache, find_component_files, get_file_content, is_test_file
from .config import SortCompConfig, find_config_file, find_project_root, load_config, load_config_for

__all__ = [
    "FileCache",
    "find_component_files",
    "get_file_content",
    "is_test_file",
    "SortCompConfig",
    "find_config_file",
    "find_project_root",
    "load_config",
    "load_config_for",
]
