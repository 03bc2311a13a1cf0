"""Batch creation: one verb against a set of subjects and (optionally) objects."""

import logging
from typing import Dict, List, Optional, Sequence

from ..core.api_client import ApiError
from ..core.models import Combination, parse_id

logger = logging.getLogger(__name__)

SELECTION_REQUIRED = "Please select at least one subject and a verb."


class BatchCombinationCreator:
    """Sends the selection to /combinations/batch and reports the count created"""

    def __init__(self, client, combination_panel):
        self.client = client
        self.combination_panel = combination_panel
        self.selection: Dict[str, object] = {'verb_id': '', 'subject_ids': [], 'object_ids': []}
        # Rows made by the last successful batch, when the server returns them
        self.created: List[Combination] = []

    async def create(self, notifier, verb_id: Optional[str], subject_ids: Sequence[str],
                     object_ids: Sequence[str] = ()) -> Optional[int]:
        self.selection = {
            'verb_id': verb_id or '',
            'subject_ids': [str(s) for s in subject_ids],
            'object_ids': [str(o) for o in object_ids],
        }

        try:
            verb = parse_id(verb_id)
            subjects = self._parse_ids(subject_ids)
            objects = self._parse_ids(object_ids)
        except ValueError:
            notifier.error("Invalid selection submitted.")
            return None

        if verb is None or not subjects:
            notifier.error(SELECTION_REQUIRED)
            return None

        try:
            result = await self.client.create_combinations_batch(verb, subjects, objects)
        except ApiError as e:
            notifier.error(f"Failed to create batch combinations: {e.message}")
            return None

        logger.info(f"Batch created {result.count} combinations for verb {verb}")
        notifier.success(f"Successfully created {result.count} combinations!")
        self.created = result.combinations
        await self.combination_panel.load(notifier)
        return result.count

    @staticmethod
    def _parse_ids(values: Sequence[str]) -> List[int]:
        ids = (parse_id(value) for value in values)
        return [i for i in ids if i is not None]
