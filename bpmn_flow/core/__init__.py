"""
Core infrastructure module for bpmn-flow.

Provides logging, tracing, and metrics.
"""

from .observability import (
    InterceptHandler,
    LogLevel,
    ObservabilityConfig,
    ObservabilityManager,
    Timer,
    record_metric,
    span,
)

__all__ = [
    "InterceptHandler",
    "LogLevel",
    "ObservabilityConfig",
    "ObservabilityManager",
    "Timer",
    "record_metric",
    "span",
]
