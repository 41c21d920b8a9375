"""
minicat.utils – Small shared utilities (path helpers).
"""
from .paths import display_path, is_hidden_path, is_within_dir

__all__ = ["display_path", "is_hidden_path", "is_within_dir"]
