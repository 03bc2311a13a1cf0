"""Word and combination records as returned by the sentence-template API."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


class WordType(str, Enum):
    VERB = 'VERB'
    SUBJECT = 'SUBJECT'
    OBJECT = 'OBJECT'


MISSING_LABEL = '-'


@dataclass
class Word:
    """A vocabulary entry tagged with the role it plays in a sentence"""
    id: int
    text: str
    type: Optional[WordType] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], role: Optional[WordType] = None) -> 'Word':
        # Nested references inside a combination only carry id and text
        raw_type = data.get('type')
        return cls(
            id=int(data['id']),
            text=str(data['text']),
            type=WordType(raw_type) if raw_type else role,
        )

    @property
    def label(self) -> str:
        return f"{self.text} ({self.id})"


@dataclass
class Combination:
    """A verb + subject (+ optional object) sentence template"""
    id: int
    verb: Word
    subject: Word
    object: Optional[Word] = None
    sentence: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Combination':
        obj = data.get('object')
        return cls(
            id=int(data['id']),
            verb=Word.from_dict(data['verb'], WordType.VERB),
            subject=Word.from_dict(data['subject'], WordType.SUBJECT),
            object=Word.from_dict(obj, WordType.OBJECT) if obj else None,
            sentence=data.get('sentence'),
        )

    @property
    def object_label(self) -> str:
        return self.object.label if self.object else MISSING_LABEL


@dataclass(frozen=True)
class SelectOption:
    value: str
    label: str

    @classmethod
    def for_word(cls, word: Word) -> 'SelectOption':
        return cls(value=str(word.id), label=word.text)


def parse_id(value: Optional[str]) -> Optional[int]:
    """Turn a submitted form value into an id; an empty selection is None"""
    if value is None:
        return None
    value = str(value).strip()
    if not value:
        return None
    return int(value)


@dataclass
class BatchResult:
    """How many combinations a batch create made, and the rows themselves when returned"""
    count: int
    combinations: List[Combination]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BatchResult':
        combinations = [Combination.from_dict(item) for item in data.get('combinations') or []]
        # The count arrives as 'created' or 'count' depending on the server version
        count = data['created'] if 'created' in data else data['count']
        return cls(count=int(count), combinations=combinations)


@dataclass
class VerbSuggestion:
    """A verb with the subject and object ids it already forms combinations with"""
    id: int
    text: str
    subject_ids: List[int]
    object_ids: List[int]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'VerbSuggestion':
        return cls(
            id=int(data['id']),
            text=str(data['text']),
            subject_ids=[int(i) for i in data.get('compatible_subject_ids') or []],
            object_ids=[int(i) for i in data.get('compatible_object_ids') or []],
        )


@dataclass
class Suggestions:
    verbs: List[VerbSuggestion]
    subjects: List[Word]
    objects: List[Word]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Suggestions':
        return cls(
            verbs=[VerbSuggestion.from_dict(v) for v in data.get('verbs') or []],
            subjects=[Word.from_dict(s, WordType.SUBJECT) for s in data.get('subjects') or []],
            objects=[Word.from_dict(o, WordType.OBJECT) for o in data.get('objects') or []],
        )

    @property
    def is_empty(self) -> bool:
        return not self.verbs

    def subjects_for(self, verb: VerbSuggestion) -> List[Word]:
        return [w for w in self.subjects if w.id in verb.subject_ids]

    def objects_for(self, verb: VerbSuggestion) -> List[Word]:
        return [w for w in self.objects if w.id in verb.object_ids]


@dataclass
class ValidationResult:
    """The server's verdict on one subject + verb + object sentence"""
    valid: bool
    sentence: str
    message: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ValidationResult':
        return cls(
            valid=bool(data['valid']),
            sentence=str(data.get('sentence') or ''),
            message=str(data.get('message') or ''),
        )
