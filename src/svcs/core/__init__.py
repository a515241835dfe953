"""Core engine layer for SVCS.

This module provides the staging index, change detection, checkout and the
repository facade tying them to a storage root.
"""

from svcs.core.changes import ChangeDetector
from svcs.core.checkout import Checkout, CheckoutResult
from svcs.core.config import UserConfig
from svcs.core.repository import Repository
from svcs.core.staging import StagingIndex

__all__ = [
    "ChangeDetector",
    "Checkout",
    "CheckoutResult",
    "UserConfig",
    "Repository",
    "StagingIndex",
]
