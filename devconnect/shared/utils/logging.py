# 📄 File: devconnect/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# This file sets up a logging system that records what happens in the app in a structured way,
# so we can see who created a post, who was denied deleting a comment, and what failed and when.

# 🧪 Purpose (Technical Summary):
# Implements structured logging with JSON formatting (python-json-logger), request-scoped
# context (request id, user id) via contextvars, and audit helpers for user actions,
# business events, and authentication/authorization decisions.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# Used by: devconnect.main (setup), API request middleware (log_context),
# domain services (audit trail), security manager (authentication events)

import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Dict, Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')
user_id_var: ContextVar[str] = ContextVar('user_id', default='')

SERVICE_NAME = 'devconnect-api'

# Global logging configuration
_logging_configured = False
_loggers_cache: Dict[str, "StructuredLogger"] = {}


class ContextFilter(logging.Filter):
    """
    Attaches request context and host information to every record.

    Installed on handlers so both the text and JSON formatters can
    reference ``request_id``, ``user_id``, ``service`` and ``hostname``.
    """

    def __init__(self):
        super().__init__()
        self.hostname = os.uname().nodename if hasattr(os, 'uname') else 'unknown'

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        record.user_id = getattr(record, 'user_id', None) or user_id_var.get()
        record.service = SERVICE_NAME
        record.hostname = self.hostname
        return True


class ContextualFormatter(logging.Formatter):
    """
    Plain-text formatter that includes the request id when one is set.
    """

    def format(self, record):
        rid = getattr(record, 'request_id', '')
        record.request_tag = f" [{rid}]" if rid else ''
        return super().format(record)


class JSONFormatter(JsonFormatter):
    """
    JSON formatter for structured logging.

    Outputs one JSON object per record with a consistent key set for
    log aggregation and analysis tools. Fields passed through
    ``StructuredLogger`` extras are merged into the top level object.
    """

    def __init__(self):
        super().__init__(
            '%(levelname)s %(name)s %(message)s %(module)s %(funcName)s %(lineno)d',
            rename_fields={
                'levelname': 'level',
                'name': 'logger',
                'funcName': 'function',
                'lineno': 'line',
            },
        )

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['service'] = getattr(record, 'service', SERVICE_NAME)
        log_record['hostname'] = getattr(record, 'hostname', 'unknown')

        # Drop empty context so logs outside a request stay compact
        for key in ('request_id', 'user_id'):
            if not log_record.get(key):
                log_record.pop(key, None)


class SecurityLogger:
    """
    Logger for security-related events and audit trails.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def log_authentication(
        self,
        user_id: str,
        event_type: str,
        success: bool,
        extra: Dict = None
    ):
        """Log authentication events."""
        extra_fields = {
            'event_type': 'authentication',
            'auth_event': event_type,
            'user_id': user_id,
            'success': success,
            **(extra or {})
        }

        level = logging.INFO if success else logging.WARNING
        self.logger.log(
            level,
            f"Auth {event_type} for user {user_id} - {'success' if success else 'failed'}",
            extra=extra_fields
        )

    def log_authorization(
        self,
        user_id: str,
        resource: str,
        action: str,
        granted: bool,
        reason: str = None,
        extra: Dict = None
    ):
        """Log authorization events."""
        extra_fields = {
            'event_type': 'authorization',
            'user_id': user_id,
            'resource': resource,
            'action': action,
            'granted': granted,
            **(extra or {})
        }

        if reason:
            extra_fields['reason'] = reason

        level = logging.INFO if granted else logging.WARNING
        self.logger.log(
            level,
            f"Authorization {action} on {resource} for user {user_id} - "
            f"{'granted' if granted else 'denied'}",
            extra=extra_fields
        )


class StructuredLogger:
    """
    Enhanced logger with structured logging capabilities.

    Provides methods for logging different types of events with
    consistent structure and contextual information.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)
        self.security = SecurityLogger(self.logger)

    def debug(self, message: str, extra: Dict = None, **kwargs):
        """Log debug message with extra fields."""
        self._log(logging.DEBUG, message, extra, **kwargs)

    def info(self, message: str, extra: Dict = None, **kwargs):
        """Log info message with extra fields."""
        self._log(logging.INFO, message, extra, **kwargs)

    def error(self, message: str, extra: Dict = None, exc_info: bool = False, **kwargs):
        """Log error message with extra fields."""
        self._log(logging.ERROR, message, extra, exc_info=exc_info, **kwargs)

    def _log(self, level: int, message: str, extra: Dict = None, **kwargs):
        """Internal log method with extra fields handling."""
        extra_fields = dict(extra or {})

        # Add any additional kwargs as extra fields
        for key, value in kwargs.items():
            if key not in ['exc_info', 'stack_info', 'stacklevel']:
                extra_fields[key] = value

        # Remove extra fields from kwargs to avoid conflict
        clean_kwargs = {k: v for k, v in kwargs.items()
                        if k in ['exc_info', 'stack_info', 'stacklevel']}

        if extra_fields:
            clean_kwargs['extra'] = extra_fields

        self.logger.log(level, message, **clean_kwargs)

    def log_user_action(
        self,
        action: str,
        user_id: str,
        resource: str = None,
        result: str = 'success',
        extra: Dict = None
    ):
        """Log user action for audit trail."""
        extra_fields = {
            'event_type': 'user_action',
            'action': action,
            'user_id': user_id,
            'result': result,
            **(extra or {})
        }

        if resource:
            extra_fields['resource'] = resource

        self.info(
            f"User {user_id} performed {action}" +
            (f" on {resource}" if resource else ""),
            extra=extra_fields
        )

    def log_business_event(
        self,
        event_type: str,
        description: str,
        entity_id: str = None,
        entity_type: str = None,
        extra: Dict = None
    ):
        """Log business events for analytics."""
        extra_fields = {
            'event_type': 'business_event',
            'business_event_type': event_type,
            'description': description,
            **(extra or {})
        }

        if entity_id:
            extra_fields['entity_id'] = entity_id
        if entity_type:
            extra_fields['entity_type'] = entity_type

        self.info(description, extra=extra_fields)


def setup_logging(
    log_level: str = 'INFO',
    log_format: str = 'json',
    enable_console: bool = True
) -> logging.Logger:
    """
    Setup application logging configuration.

    Replaces any handlers on the root logger with a single stdout handler
    using either the JSON or the plain-text formatter. Calling it again
    after the first successful call is a no-op.

    Args:
        log_level: Minimum level name (DEBUG, INFO, ...)
        log_format: 'json' or 'text'
        enable_console: Attach the stdout handler

    Returns:
        logging.Logger: The 'startup' logger
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger("startup")

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format.lower() == 'json':
        formatter = JSONFormatter()
    else:
        formatter = ContextualFormatter(
            '%(asctime)s - %(name)s - %(levelname)s%(request_tag)s - %(message)s'
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(ContextFilter())
        root_logger.addHandler(console_handler)

    logging.getLogger('pymongo').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)
    logging.getLogger('passlib').setLevel(logging.ERROR)

    _logging_configured = True
    return logging.getLogger("startup")


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        StructuredLogger instance
    """
    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = StructuredLogger(name)
    _loggers_cache[name] = logger

    return logger


@contextmanager
def log_context(request_id: Optional[str] = None, user_id: Optional[str] = None):
    """
    Context manager for adding contextual information to logs.

    Args:
        request_id: Request identifier, generated when omitted
        user_id: User identifier
    """
    if request_id is None:
        request_id = str(uuid4())

    request_token = request_id_var.set(request_id)
    user_token = user_id_var.set(user_id or '')

    try:
        yield {'request_id': request_id, 'user_id': user_id}
    finally:
        request_id_var.reset(request_token)
        user_id_var.reset(user_token)


def bind_user(user_id: str) -> None:
    """Attach the authenticated user to the current request context."""
    user_id_var.set(user_id)


# Convenience functions for common logging patterns
def log_startup_event(service_name: str, version: str, extra: Dict = None):
    """Log application startup event."""
    logger = get_logger('startup')
    logger.info(
        f"Service {service_name} starting up",
        extra={
            'event_type': 'service_startup',
            'service_name': service_name,
            'version': version,
            **(extra or {})
        }
    )


def log_shutdown_event(service_name: str, extra: Dict = None):
    """Log application shutdown event."""
    logger = get_logger('shutdown')
    logger.info(
        f"Service {service_name} shutting down",
        extra={
            'event_type': 'service_shutdown',
            'service_name': service_name,
            **(extra or {})
        }
    )
