"""SVCS - a small local version control system.

SVCS tracks a chosen set of files, stores full-copy snapshots of them as
commits, keeps a newest-first history and restores any recorded snapshot.
"""

__version__ = "0.1.0"
__author__ = "SVCS Contributors"

__all__ = ["__version__", "__author__"]
