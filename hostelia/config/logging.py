"""
Logging configuration for the Hostelia dashboard service.
Provides console and optional file logging with plain, coloured
or JSON formatters.
"""

import logging
import logging.config
import os
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger

from hostelia.config.settings import Settings, get_settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with additional fields"""

    def __init__(self, *args, environment: str = "development", **kwargs):
        super().__init__(*args, **kwargs)
        self.environment = environment

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]):
        """Add custom fields to the log record"""
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['environment'] = self.environment

        if hasattr(record, 'request_id'):
            log_record['request_id'] = record.request_id

        if record.exc_info:
            log_record['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': self.formatException(record.exc_info)
            }


class RequestIdFilter(logging.Filter):
    """Attach the current request id (if any) to every record"""

    def filter(self, record: logging.LogRecord) -> bool:
        from hostelia.core.logging import request_id

        if not hasattr(record, 'request_id'):
            record.request_id = request_id.get() or "-"
        return True


def build_logging_config(settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Create the dictConfig mapping for the given settings"""
    settings = settings or get_settings()

    if settings.LOG_FORMAT == "json":
        console_formatter = 'json'
    elif settings.is_development():
        console_formatter = 'colored'
    else:
        console_formatter = 'standard'

    handlers: Dict[str, Any] = {
        'console': {
            'level': 'DEBUG' if settings.DEBUG else settings.LOG_LEVEL,
            'class': 'logging.StreamHandler',
            'formatter': console_formatter,
            'filters': ['request_id'],
        },
    }

    if settings.LOG_DIR:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        handlers['file'] = {
            'level': 'INFO',
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': os.path.join(settings.LOG_DIR, 'hostelia.log'),
            'maxBytes': 10485760,  # 10MB
            'backupCount': 10,
            'formatter': 'json' if settings.LOG_FORMAT == "json" else 'standard',
            'filters': ['request_id'],
            'encoding': 'utf8'
        }

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'filters': {
            'request_id': {'()': RequestIdFilter},
        },
        'formatters': {
            'standard': {
                'format': '%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s'
            },
            'json': {
                '()': CustomJsonFormatter,
                'format': '%(timestamp)s %(level)s %(logger)s %(message)s',
                'environment': settings.ENVIRONMENT,
            },
            'colored': {
                '()': 'colorlog.ColoredFormatter',
                'format': '%(log_color)s%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s',
                'log_colors': {
                    'DEBUG': 'cyan',
                    'INFO': 'green',
                    'WARNING': 'yellow',
                    'ERROR': 'red',
                    'CRITICAL': 'red,bg_white',
                }
            }
        },
        'handlers': handlers,
        'loggers': {
            '': {  # Root logger
                'handlers': list(handlers),
                'level': settings.LOG_LEVEL,
            },
            'hostelia': {
                'handlers': list(handlers),
                'level': settings.LOG_LEVEL,
                'propagate': False
            },
            'httpx': {
                'level': 'WARNING',
            },
            'uvicorn.access': {
                'handlers': ['console'],
                'level': 'INFO',
                'propagate': False
            }
        }
    }


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Configure application logging"""
    settings = settings or get_settings()
    logging.config.dictConfig(build_logging_config(settings))
    logger = logging.getLogger("hostelia")
    logger.info(f"Logging initialized with level: {settings.LOG_LEVEL}")
    return logger
