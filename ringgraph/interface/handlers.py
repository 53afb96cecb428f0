"""Logging handlers for dashboard integration."""

import logging


class DashboardLogHandler(logging.Handler):
    """Handler that routes log records into the dashboard's log strip."""

    def __init__(self, dashboard):
        super().__init__()
        self.dashboard = dashboard

    def emit(self, record):
        try:
            msg = self.format(record)
        except Exception:
            self.handleError(record)
            return
        self.dashboard.add_log(msg)
