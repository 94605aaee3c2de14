from .logging import LOG_LEVELS, LogMessage, LogSink, emit_log
from .sinks import JsonlLogSink, MemoryLogSink, StdoutLogSink

__all__ = [
    "LOG_LEVELS",
    "LogMessage",
    "LogSink",
    "emit_log",
    "JsonlLogSink",
    "MemoryLogSink",
    "StdoutLogSink",
]
