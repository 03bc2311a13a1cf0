"""
Console panels.

Each panel owns its own state (filter, loaded rows, form draft) and talks to
the API through the client it was constructed with. Notifications go to the
notifier passed into each operation.
"""

from .batch_creator import BatchCombinationCreator
from .combination_panel import CombinationPanel
from .console import Console, ConsoleSessions, TABS
from .option_loader import OptionLoader
from .suggestion_preview import SuggestionPreview
from .word_panel import WordPanel

__all__ = [
    'BatchCombinationCreator',
    'CombinationPanel',
    'Console',
    'ConsoleSessions',
    'TABS',
    'OptionLoader',
    'SuggestionPreview',
    'WordPanel',
]
