"""
Validation Configuration

Runtime options for loading and validating process definitions, including
logging and telemetry switches.
"""

import os
from dataclasses import dataclass

from bpmn_flow.core.observability import LogLevel, ObservabilityConfig

_TRUE_VALUES = ("1", "true", "yes", "on")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass
class ValidationConfig:
    """Complete bpmn-flow configuration."""

    # Behavior
    fail_on_error: bool = False

    # Observability
    log_level: str = LogLevel.INFO.value
    json_logs: bool = False
    enable_tracing: bool = False
    enable_metrics: bool = False

    @classmethod
    def from_env(cls) -> "ValidationConfig":
        """Load configuration from environment variables."""
        log_level = os.getenv("BPMN_FLOW_LOG_LEVEL", LogLevel.INFO.value).upper()
        try:
            log_level = LogLevel(log_level).value
        except ValueError:
            log_level = LogLevel.INFO.value

        return cls(
            fail_on_error=_env_flag("BPMN_FLOW_FAIL_ON_ERROR", False),
            log_level=log_level,
            json_logs=_env_flag("BPMN_FLOW_JSON_LOGS", False),
            enable_tracing=_env_flag("BPMN_FLOW_ENABLE_TRACING", False),
            enable_metrics=_env_flag("BPMN_FLOW_ENABLE_METRICS", False),
        )

    def to_observability_config(self) -> ObservabilityConfig:
        return ObservabilityConfig(
            log_level=self.log_level,
            json_logs=self.json_logs,
            enable_tracing=self.enable_tracing,
            enable_metrics=self.enable_metrics,
        )
