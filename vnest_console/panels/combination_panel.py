"""Combinations tab: list, filter by verb, create and delete sentence templates."""

import logging
from typing import Dict, List, Optional

from ..core.api_client import ApiError
from ..core.models import Combination, parse_id

logger = logging.getLogger(__name__)


def empty_combination_draft() -> Dict[str, str]:
    return {'verb_id': '', 'subject_id': '', 'object_id': ''}


class CombinationPanel:
    """Owns the combination table and the single-combination form"""

    def __init__(self, client):
        self.client = client
        self.verb_filter: Optional[int] = None
        self.combinations: List[Combination] = []
        self.draft = empty_combination_draft()

    @property
    def is_empty(self) -> bool:
        return not self.combinations

    async def load(self, notifier, verb_filter: Optional[str] = None) -> bool:
        """
        Fetch combinations, optionally for one verb.
        An empty string clears the filter; None keeps the current one.
        """
        requested = self.verb_filter
        if verb_filter is not None:
            try:
                requested = parse_id(verb_filter)
            except ValueError:
                notifier.error(f"Invalid verb filter: {verb_filter}")
                return False

        try:
            combinations = await self.client.list_combinations(requested)
        except ApiError as e:
            notifier.error(f"Failed to load combinations: {e.message}")
            return False

        self.verb_filter = requested
        self.combinations = combinations
        logger.debug(f"Loaded {len(combinations)} combinations (verb={requested})")
        return True

    async def create(self, notifier, verb_id: Optional[str], subject_id: Optional[str],
                     object_id: Optional[str] = None) -> bool:
        self.draft = {
            'verb_id': verb_id or '',
            'subject_id': subject_id or '',
            'object_id': object_id or '',
        }

        try:
            verb = parse_id(verb_id)
            subject = parse_id(subject_id)
            obj = parse_id(object_id)
        except ValueError:
            notifier.error("Invalid selection submitted.")
            return False

        if verb is None or subject is None:
            notifier.error("Please select a verb and a subject.")
            return False

        try:
            combination = await self.client.create_combination(verb, subject, obj)
        except ApiError as e:
            notifier.error(f"Failed to create combination: {e.message}")
            return False

        logger.info(f"Created combination {combination.id}")
        notifier.success("Combination created successfully!")
        self.draft = empty_combination_draft()
        await self.load(notifier)
        return True

    async def delete(self, notifier, combination_id: int, confirmed: bool) -> bool:
        if not confirmed:
            return False

        try:
            await self.client.delete_combination(combination_id)
        except ApiError as e:
            notifier.error(f"Failed to delete combination: {e.message}")
            return False

        logger.info(f"Deleted combination {combination_id}")
        notifier.success("Combination deleted successfully!")
        await self.load(notifier)
        return True

    async def delete_for_verb(self, notifier, verb_id: int, confirmed: bool) -> bool:
        """Remove every combination built on one verb"""
        if not confirmed:
            return False

        try:
            await self.client.delete_combinations_by_verb(verb_id)
        except ApiError as e:
            notifier.error(f"Failed to delete combinations for verb {verb_id}: {e.message}")
            return False

        logger.info(f"Deleted all combinations for verb {verb_id}")
        notifier.success("All combinations for the verb were deleted.")
        await self.load(notifier)
        return True
