"""
Code generation backends.

Contains language-specific code generators.
"""

from __future__ import annotations

from .base import CodeBackend
from .kotlin_backend import KotlinBackend
from .swift_backend import SwiftBackend

__all__ = [
    "CodeBackend",
    "SwiftBackend",
    "KotlinBackend",
]
