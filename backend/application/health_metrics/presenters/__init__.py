from .report_presenter import (
    DEFAULT_CATEGORY_DISPLAY,
    CategoryDisplay,
    ReportPresenter,
    ReportView,
)

__all__ = [
    "DEFAULT_CATEGORY_DISPLAY",
    "CategoryDisplay",
    "ReportPresenter",
    "ReportView",
]
