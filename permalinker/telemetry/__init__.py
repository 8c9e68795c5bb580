"""Telemetry scaffolds.

This package emits deterministic log lines for permalink operations.
"""

from .logger import ResolutionLogger

__all__ = ["ResolutionLogger"]
