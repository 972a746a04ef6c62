from .analyze_health import AnalyzeHealthCommand, AnalyzeHealthHandler

__all__ = ["AnalyzeHealthCommand", "AnalyzeHealthHandler"]
