"""Reporting modules."""

from .report_generator import ReportGenerator

__all__ = ['ReportGenerator']
