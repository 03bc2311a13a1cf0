"""Populates the verb/subject/object selects used by the combination forms."""

import asyncio
import logging
from typing import Dict, List

from ..core.api_client import ApiError
from ..core.models import SelectOption, WordType

logger = logging.getLogger(__name__)

ALL_VERBS = SelectOption('', 'All Verbs')

# select id -> (word type, leading sentinel option or None for multi-selects)
SELECTS = {
    'combo-verb': (WordType.VERB, SelectOption('', 'Select verb...')),
    'batch-verb': (WordType.VERB, SelectOption('', 'Select verb...')),
    'combo-filter': (WordType.VERB, ALL_VERBS),
    'combo-subject': (WordType.SUBJECT, SelectOption('', 'Select subject...')),
    'batch-subjects': (WordType.SUBJECT, None),
    'combo-object': (WordType.OBJECT, SelectOption('', 'Select object...')),
    'batch-objects': (WordType.OBJECT, None),
    'check-verb': (WordType.VERB, SelectOption('', 'Select verb...')),
    'check-subject': (WordType.SUBJECT, SelectOption('', 'Select subject...')),
    'check-object': (WordType.OBJECT, SelectOption('', 'Select object...')),
}


class OptionLoader:
    """Keeps the last successfully loaded option list per word type"""

    def __init__(self, client):
        self.client = client
        self.options: Dict[WordType, List[SelectOption]] = {t: [] for t in WordType}

    async def load(self, notifier) -> None:
        """Fetch all three word types concurrently; each populates on its own"""
        await asyncio.gather(*(self._populate(notifier, word_type) for word_type in WordType))

    async def _populate(self, notifier, word_type: WordType) -> bool:
        try:
            words = await self.client.list_words(word_type.value)
        except ApiError as e:
            notifier.error(f"Failed to load {word_type.value.lower()} options: {e.message}")
            return False

        self.options[word_type] = [SelectOption.for_word(word) for word in words]
        logger.debug(f"Loaded {len(words)} {word_type.value} options")
        return True

    def for_select(self, select_id: str) -> List[SelectOption]:
        word_type, sentinel = SELECTS[select_id]
        options = list(self.options[word_type])
        return [sentinel] + options if sentinel else options
