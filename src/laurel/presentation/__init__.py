"""Command-line interfaces and other presentation layer components."""

from .cli.inspect_structure import main as inspect_structure_main

__all__ = [
    "inspect_structure_main",
]
