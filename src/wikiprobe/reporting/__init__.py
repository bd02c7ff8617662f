"""Console reporting."""
from wikiprobe.reporting.console import ConsoleReporter

__all__ = ["ConsoleReporter"]
