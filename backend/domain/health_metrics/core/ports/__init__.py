"""Ports for health metrics domain."""

from .calculators import IBMICalculator, IBMRCalculator, ITDEECalculator
from .report_repository import IReportRepository

__all__ = [
    "IBMICalculator",
    "IBMRCalculator",
    "ITDEECalculator",
    "IReportRepository",
]
