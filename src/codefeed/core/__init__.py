"""Core components for codefeed."""

from .models import (
    Config, Entry, AdmittedFile, SkipRecord, SkipReason, RunningTotals,
    RunResult, Report,
)
from .errors import CodefeedError
from .classifier import FileClassifier
from .limiter import Limiter
from .aggregator import ContextAggregator
from .reporter import Reporter
from .tokenizer import TokenCounter

__all__ = [
    "Config",
    "Entry",
    "AdmittedFile",
    "SkipRecord",
    "SkipReason",
    "RunningTotals",
    "RunResult",
    "Report",
    "CodefeedError",
    "FileClassifier",
    "Limiter",
    "ContextAggregator",
    "Reporter",
    "TokenCounter",
]
