"""
Core domain layer for quiz-match.

This package contains pure answer-matching logic with no external dependencies.
All code here should be testable without I/O operations.
"""

from __future__ import annotations

__all__ = []
