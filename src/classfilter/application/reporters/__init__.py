"""Reporters: human-readable rendering of filter trees."""

from classfilter.application.reporters.tree import TreeReportConfig, TreeReporter

__all__ = ["TreeReportConfig", "TreeReporter"]
