"""
Domain check pipeline: normalize, render, execute, translate, classify.
"""

from .check_service import CheckService, build_check_service
from .errors import CheckFailure, FailureKind, classify

__all__ = [
    "CheckService",
    "build_check_service",
    "CheckFailure",
    "FailureKind",
    "classify",
]
