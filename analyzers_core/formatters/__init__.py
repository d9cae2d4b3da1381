"""Report formatters."""

from analyzers_core.formatters.base import Reporter
from analyzers_core.formatters.console_formatter import ConsoleFormatter
from analyzers_core.formatters.json_formatter import JsonFormatter

__all__ = ["ConsoleFormatter", "JsonFormatter", "Reporter"]
