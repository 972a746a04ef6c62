from .restore_last_report import RestoreLastReportHandler, RestoreLastReportQuery

__all__ = ["RestoreLastReportHandler", "RestoreLastReportQuery"]
