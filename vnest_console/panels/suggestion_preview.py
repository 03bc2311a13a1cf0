"""
Read-only preview of the exercise material the API serves to learners.

Shows which subjects and objects each verb is suggested with, and lets an
operator check a subject + verb + object sentence against the server's rules
before or after editing combinations.
"""

import logging
from typing import Dict, Optional

from ..core.api_client import ApiError
from ..core.models import Suggestions, ValidationResult, parse_id

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5

SENTENCE_REQUIRED = "Please select a subject, a verb and an object to check."


def empty_check_draft() -> Dict[str, str]:
    return {'subject_id': '', 'verb_id': '', 'object_id': ''}


class SuggestionPreview:
    def __init__(self, client, limit: int = DEFAULT_LIMIT):
        self.client = client
        self.limit = limit
        self.suggestions: Optional[Suggestions] = None
        self.result: Optional[ValidationResult] = None
        self.draft = empty_check_draft()

    async def load(self, notifier) -> bool:
        try:
            suggestions = await self.client.get_suggestions(self.limit)
        except ApiError as e:
            notifier.error(f"Failed to load suggestions: {e.message}")
            return False

        self.suggestions = suggestions
        logger.debug(f"Loaded suggestions for {len(suggestions.verbs)} verbs")
        return True

    async def check(self, notifier, subject_id: Optional[str], verb_id: Optional[str],
                    object_id: Optional[str]) -> Optional[ValidationResult]:
        """
        Ask the server whether the sentence is allowed.
        The verdict is shown in the preview, not as a notification; only
        failures to get one are notified.
        """
        self.draft = {
            'subject_id': subject_id or '',
            'verb_id': verb_id or '',
            'object_id': object_id or '',
        }
        self.result = None

        try:
            subject = parse_id(subject_id)
            verb = parse_id(verb_id)
            obj = parse_id(object_id)
        except ValueError:
            notifier.error("Invalid selection submitted.")
            return None

        if subject is None or verb is None or obj is None:
            notifier.error(SENTENCE_REQUIRED)
            return None

        try:
            result = await self.client.validate_sentence(subject, verb, obj)
        except ApiError as e:
            notifier.error(f"Failed to check sentence: {e.message}")
            return None

        logger.info(f"Checked sentence {subject}/{verb}/{obj}: valid={result.valid}")
        self.result = result
        return result
