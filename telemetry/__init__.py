"""JSONL telemetry for rover runs."""

from .logger import TelemetryLogger

__all__ = ["TelemetryLogger"]
