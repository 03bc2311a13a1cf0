"""Shared fixtures: a recording stand-in for the API client."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from vnest_console.core.models import (
    BatchResult,
    Combination,
    Suggestions,
    ValidationResult,
    VerbSuggestion,
    Word,
    WordType,
)
from vnest_console.core.notifications import Notifier


class FakeApiClient:
    """Records every call and answers from in-memory lists"""

    def __init__(self):
        self.calls: List[tuple] = []
        self.words: List[Word] = []
        self.combinations: List[Combination] = []
        self.batch_count = 0
        self.batch_rows: List[Combination] = []
        self.suggestions = Suggestions(verbs=[], subjects=[], objects=[])
        self.failures: Dict[str, Exception] = {}
        self._next_id = 100

    def fail(self, method: str, error: Exception) -> None:
        self.failures[method] = error

    def _record(self, method: str, *args: Any) -> None:
        self.calls.append((method,) + args)
        error = self.failures.get(method)
        if error is not None:
            raise error

    def calls_to(self, method: str) -> List[tuple]:
        return [call for call in self.calls if call[0] == method]

    async def list_words(self, type_filter: Optional[str] = None) -> List[Word]:
        self._record('list_words', type_filter)
        if type_filter:
            return [w for w in self.words if w.type and w.type.value == type_filter]
        return list(self.words)

    async def create_word(self, text: str, word_type: WordType) -> Word:
        self._record('create_word', text, word_type)
        self._next_id += 1
        word = Word(self._next_id, text, word_type)
        self.words.append(word)
        return word

    async def delete_word(self, word_id: int) -> None:
        self._record('delete_word', word_id)
        self.words = [w for w in self.words if w.id != word_id]

    async def list_combinations(self, verb_id: Optional[int] = None) -> List[Combination]:
        self._record('list_combinations', verb_id)
        if verb_id is not None:
            return [c for c in self.combinations if c.verb.id == verb_id]
        return list(self.combinations)

    async def create_combination(self, verb_id, subject_id, object_id=None) -> Combination:
        self._record('create_combination', verb_id, subject_id, object_id)
        self._next_id += 1
        combination = Combination(
            id=self._next_id,
            verb=Word(verb_id, f"verb{verb_id}", WordType.VERB),
            subject=Word(subject_id, f"subject{subject_id}", WordType.SUBJECT),
            object=Word(object_id, f"object{object_id}", WordType.OBJECT) if object_id else None,
        )
        self.combinations.append(combination)
        return combination

    async def create_combinations_batch(self, verb_id, subject_ids, object_ids) -> BatchResult:
        self._record('create_combinations_batch', verb_id, list(subject_ids), list(object_ids))
        return BatchResult(count=self.batch_count, combinations=list(self.batch_rows))

    async def delete_combination(self, combination_id: int) -> None:
        self._record('delete_combination', combination_id)
        self.combinations = [c for c in self.combinations if c.id != combination_id]

    async def delete_combinations_by_verb(self, verb_id: int) -> None:
        self._record('delete_combinations_by_verb', verb_id)
        self.combinations = [c for c in self.combinations if c.verb.id != verb_id]

    async def get_suggestions(self, limit: Optional[int] = None) -> Suggestions:
        self._record('get_suggestions', limit)
        return self.suggestions

    async def validate_sentence(self, subject_id, verb_id, object_id) -> ValidationResult:
        """Valid when a combination with exactly these three words exists"""
        self._record('validate_sentence', subject_id, verb_id, object_id)
        words = {w.id: w.text for w in self.words}
        sentence = ' '.join(words.get(i, '?') for i in (subject_id, verb_id, object_id))
        valid = any(
            c.subject.id == subject_id and c.verb.id == verb_id
            and c.object is not None and c.object.id == object_id
            for c in self.combinations
        )
        message = "Correct! A good sentence." if valid else "Wrong. That sentence is not allowed."
        return ValidationResult(valid=valid, sentence=sentence, message=message)


RUN = Word(1, 'run', WordType.VERB)
EAT = Word(2, 'eat', WordType.VERB)
DOG = Word(10, 'dog', WordType.SUBJECT)
CAT = Word(11, 'cat', WordType.SUBJECT)
BONE = Word(20, 'bone', WordType.OBJECT)


@pytest.fixture
def client():
    fake = FakeApiClient()
    fake.words = [RUN, EAT, DOG, CAT, BONE]
    fake.combinations = [
        Combination(7, verb=EAT, subject=DOG, object=BONE, sentence='dog eat bone'),
        Combination(8, verb=RUN, subject=CAT),
    ]
    fake.suggestions = Suggestions(
        verbs=[VerbSuggestion(2, 'eat', subject_ids=[10], object_ids=[20])],
        subjects=[DOG],
        objects=[BONE],
    )
    return fake


@pytest.fixture
def notifier():
    return Notifier()
