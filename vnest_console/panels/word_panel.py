"""Words tab: list, filter, create and delete vocabulary entries."""

import logging
from typing import Dict, List, Optional

from ..core.api_client import ApiError
from ..core.models import Word, WordType

logger = logging.getLogger(__name__)

FILTER_ALL = ''


def empty_word_draft() -> Dict[str, str]:
    return {'text': '', 'type': ''}


class WordPanel:
    """
    Owns the word table and the word-creation form.
    The notifier is passed per call so each request reports to its own page.
    """

    def __init__(self, client):
        self.client = client
        self.type_filter: str = FILTER_ALL
        self.words: List[Word] = []
        self.draft = empty_word_draft()

    @property
    def is_empty(self) -> bool:
        return not self.words

    async def load(self, notifier, type_filter: Optional[str] = None) -> bool:
        """
        Fetch the words for the active filter.
        An empty string means no filter; None keeps the current one.
        The filter only changes once the fetch succeeds; on failure the
        previously loaded rows and filter stay in place.
        """
        requested = self.type_filter if type_filter is None else type_filter

        try:
            words = await self.client.list_words(requested or None)
        except ApiError as e:
            notifier.error(f"Failed to load words: {e.message}")
            return False

        self.type_filter = requested
        self.words = words
        logger.debug(f"Loaded {len(words)} words (filter={requested!r})")
        return True

    async def create(self, notifier, text: Optional[str], word_type: Optional[str]) -> bool:
        self.draft = {'text': text or '', 'type': word_type or ''}

        if not (text or '').strip() or not word_type:
            notifier.error("Please enter the word text and choose a type.")
            return False
        try:
            word_type = WordType(word_type)
        except ValueError:
            notifier.error(f"Unknown word type: {word_type}")
            return False

        try:
            word = await self.client.create_word(text, word_type)
        except ApiError as e:
            notifier.error(f"Failed to create word: {e.message}")
            return False

        logger.info(f"Created word {word.id} ({word.type.value if word.type else '?'})")
        notifier.success("Word created successfully!")
        self.draft = empty_word_draft()
        await self.load(notifier)
        return True

    async def delete(self, notifier, word_id: int, confirmed: bool) -> bool:
        if not confirmed:
            return False

        try:
            await self.client.delete_word(word_id)
        except ApiError as e:
            notifier.error(f"Failed to delete word: {e.message}")
            return False

        logger.info(f"Deleted word {word_id}")
        notifier.success("Word deleted successfully!")
        await self.load(notifier)
        return True
