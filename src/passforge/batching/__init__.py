"""
Batch generation.

Runs a generator N times, optionally scoring each secret.
"""

from .batch_orchestrator import (
    BatchConfig,
    BatchOrchestrator,
    BatchResult,
    generate_many,
    split_range,
)

__all__ = [
    "BatchConfig",
    "BatchOrchestrator",
    "BatchResult",
    "generate_many",
    "split_range",
]
