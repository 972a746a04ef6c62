from .health_report_orchestrator import HealthAnalysis, HealthReportOrchestrator

__all__ = ["HealthAnalysis", "HealthReportOrchestrator"]
