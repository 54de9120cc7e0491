"""
Functional modules

Provides:
- BatchRunner: per-item loop with failure policy
- ResourceModule: per-resource convenience wrapper used by OneInchClient
"""

from .batch import BatchRunner
from .resource import ResourceModule

__all__ = [
    "BatchRunner",
    "ResourceModule",
]
