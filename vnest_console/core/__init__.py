"""
Core console components.

This package contains the building blocks shared by every panel:
- Configuration and logging setup
- The async API client and its error taxonomy
- Word/combination records
- User-facing notifications
"""

from .config import ConsoleConfig, get_console_config, setup_logging
from .api_client import (
    ApiClient,
    ApiError,
    ApiFailure,
    HttpStatusError,
    MalformedResponseError,
    TransportError,
)
from .models import (
    BatchResult,
    Combination,
    SelectOption,
    Suggestions,
    ValidationResult,
    VerbSuggestion,
    Word,
    WordType,
    parse_id,
)
from .notifications import Notification, Notifier

__all__ = [
    'ConsoleConfig',
    'get_console_config',
    'setup_logging',
    'ApiClient',
    'ApiError',
    'ApiFailure',
    'HttpStatusError',
    'MalformedResponseError',
    'TransportError',
    'BatchResult',
    'Combination',
    'SelectOption',
    'Suggestions',
    'ValidationResult',
    'VerbSuggestion',
    'Word',
    'WordType',
    'parse_id',
    'Notification',
    'Notifier',
]
