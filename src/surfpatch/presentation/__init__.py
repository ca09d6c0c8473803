"""Command-line interfaces and other presentation layer components."""

from .cli.make_patch import main as make_patch_main

__all__ = ["make_patch_main"]
