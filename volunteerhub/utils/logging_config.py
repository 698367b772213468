# volunteerhub/utils/logging_config.py
"""
Application logging setup: console and rotating file handlers, text or JSON records.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler

from flask.logging import default_handler

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON objects"""

    def __init__(self, app_name="VolunteerHub"):
        super().__init__()
        self.app_name = app_name

    def format(self, record):
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
            "app": self.app_name,
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _build_formatter(app):
    if str(app.config.get("LOG_FORMAT", "text")).lower() == "json":
        return JSONFormatter(app.config.get("APP_NAME", "VolunteerHub"))
    return logging.Formatter(TEXT_FORMAT)


def setup_logging(app):
    """Configure app.logger from the app config. Safe to call more than once."""
    level_name = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    formatter = _build_formatter(app)

    # Replace handlers we installed on a previous call
    for handler in list(app.logger.handlers):
        if getattr(handler, "_volunteerhub_handler", False):
            app.logger.removeHandler(handler)
            handler.close()

    if app.config.get("ENABLE_CONSOLE_LOGGING", True):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        console_handler._volunteerhub_handler = True
        app.logger.addHandler(console_handler)

    if app.config.get("ENABLE_FILE_LOGGING", False):
        log_dir = app.config.get("LOG_DIR", "logs")
        try:
            os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                os.path.join(log_dir, "volunteerhub.log"),
                maxBytes=app.config.get("LOG_FILE_MAX_BYTES", 10485760),
                backupCount=app.config.get("LOG_FILE_BACKUP_COUNT", 10),
            )
            file_handler.setFormatter(formatter)
            file_handler.setLevel(level)
            file_handler._volunteerhub_handler = True
            app.logger.addHandler(file_handler)
        except OSError as e:
            app.logger.warning(f"File logging disabled, could not open {log_dir}: {str(e)}")

    app.logger.removeHandler(default_handler)
    app.logger.setLevel(level)
    return app.logger
