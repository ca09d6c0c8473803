"""Command-line interface modules."""

from .make_patch import main as make_patch_main

__all__ = ["make_patch_main"]
