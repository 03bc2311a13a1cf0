#!/usr/bin/env python3
"""
Sentence-template API client
Async wrapper around the words/combinations REST API and its {success, data} envelope
"""

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional

import aiohttp

from .models import BatchResult, Combination, Suggestions, ValidationResult, Word, WordType

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for every failure a console handler has to report"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(ApiError):
    """The request never produced a response (connection refused, timeout, ...)"""


class MalformedResponseError(ApiError):
    """The response body was not JSON or not shaped like the envelope"""


class ApiFailure(ApiError):
    """The server answered with success: false"""


class HttpStatusError(ApiError):
    """The server answered with a non-2xx status"""

    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status


def envelope_message(envelope: Any) -> Optional[str]:
    """Pull a human-readable message out of a failure envelope"""
    if not isinstance(envelope, dict):
        return None
    error = envelope.get('error')
    if error:
        return str(error)
    data = envelope.get('data')
    if isinstance(data, str) and data:
        return data
    if isinstance(data, list) and data and all(isinstance(item, str) for item in data):
        return '; '.join(data)
    return None


class ApiClient:
    """
    Client for the /api words, combinations and suggestions endpoints.
    Use as an async context manager; one aiohttp session per console lifetime.
    Every call makes exactly one attempt.
    """

    def __init__(self, base_url: str, timeout: float = 30.0):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        """Async context manager entry"""
        self.session = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.timeout),
            headers={'Accept': 'application/json'},
        )
        logger.info(f"API client opened for {self.base_url}")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        if self.session:
            await self.session.close()
            self.session = None
            logger.info("API client closed")

    # Words -------------------------------------------------------------------

    async def list_words(self, type_filter: Optional[str] = None) -> List[Word]:
        """GET /words, or /words?type=<TYPE> when a filter is given"""
        params = {'type': str(type_filter)} if type_filter else None
        data = await self._call('GET', '/words', params=params)
        return [self._build(Word.from_dict, item) for item in self._as_list(data)]

    async def create_word(self, text: str, word_type: WordType) -> Word:
        payload = {'text': text, 'type': WordType(word_type).value}
        data = await self._call('POST', '/words', payload=payload)
        return self._build(Word.from_dict, self._as_dict(data))

    async def delete_word(self, word_id: int) -> None:
        await self._call('DELETE', f'/words/{word_id}', expect_body=False)

    # Combinations ------------------------------------------------------------

    async def list_combinations(self, verb_id: Optional[int] = None) -> List[Combination]:
        """GET /combinations, or /combinations?verb_id=<id> when a verb is given"""
        params = {'verb_id': str(verb_id)} if verb_id is not None else None
        data = await self._call('GET', '/combinations', params=params)
        return [self._build(Combination.from_dict, item) for item in self._as_list(data)]

    async def create_combination(self, verb_id: int, subject_id: int,
                                 object_id: Optional[int] = None) -> Combination:
        payload = {'verb_id': verb_id, 'subject_id': subject_id, 'object_id': object_id}
        data = await self._call('POST', '/combinations', payload=payload)
        return self._build(Combination.from_dict, self._as_dict(data))

    async def create_combinations_batch(self, verb_id: int, subject_ids: List[int],
                                        object_ids: List[int]) -> BatchResult:
        """POST /combinations/batch; the server expands the cross-product"""
        payload = {
            'verb_id': verb_id,
            'subject_ids': list(subject_ids),
            'object_ids': list(object_ids),
        }
        data = await self._call('POST', '/combinations/batch', payload=payload)
        return self._build(BatchResult.from_dict, self._as_dict(data))

    async def delete_combination(self, combination_id: int) -> None:
        await self._call('DELETE', f'/combinations/{combination_id}', expect_body=False)

    async def delete_combinations_by_verb(self, verb_id: int) -> None:
        await self._call('DELETE', f'/combinations/by-verb/{verb_id}', expect_body=False)

    # Suggestions -------------------------------------------------------------

    async def get_suggestions(self, limit: Optional[int] = None) -> Suggestions:
        """GET /suggestions: verbs with their compatible subjects and objects"""
        params = {'limit': str(limit)} if limit is not None else None
        data = await self._call('GET', '/suggestions', params=params)
        return self._build(Suggestions.from_dict, self._as_dict(data))

    async def validate_sentence(self, subject_id: int, verb_id: int,
                                object_id: int) -> ValidationResult:
        """POST /suggestions/validate: ask whether the three words form an allowed sentence"""
        payload = {'subject_id': subject_id, 'verb_id': verb_id, 'object_id': object_id}
        data = await self._call('POST', '/suggestions/validate', payload=payload)
        return self._build(ValidationResult.from_dict, self._as_dict(data))

    # Transport ---------------------------------------------------------------

    async def _call(self, method: str, path: str, params: Optional[Dict[str, str]] = None,
                    payload: Optional[Dict[str, Any]] = None, expect_body: bool = True) -> Any:
        if self.session is None:
            raise RuntimeError("ApiClient must be used inside 'async with'")

        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url} params={params} payload={payload}")

        try:
            async with self.session.request(method, url, params=params, json=payload) as response:
                status = response.status
                body = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"{method} {path} failed: {e!r}")
            raise TransportError(f"Could not reach the API ({e.__class__.__name__})") from e

        if not 200 <= status < 300:
            message = envelope_message(self._try_json(body)) or f"HTTP {status}"
            logger.warning(f"{method} {path} returned {status}: {message}")
            raise HttpStatusError(status, message)

        if not expect_body:
            return None

        envelope = self._try_json(body)
        if not isinstance(envelope, dict) or 'success' not in envelope:
            logger.warning(f"{method} {path} returned a malformed body")
            raise MalformedResponseError("The API returned an unexpected response")

        if not envelope['success']:
            message = envelope_message(envelope) or "The API reported a failure"
            logger.warning(f"{method} {path} reported failure: {message}")
            raise ApiFailure(message)

        return envelope.get('data')

    @staticmethod
    def _try_json(body: str) -> Any:
        if not body:
            return None
        try:
            return json.loads(body)
        except ValueError:
            return None

    @staticmethod
    def _build(factory, item: Any):
        try:
            return factory(item)
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedResponseError(f"Unexpected record in response data: {e}") from e

    @staticmethod
    def _as_list(data: Any) -> List[Dict[str, Any]]:
        if not isinstance(data, list):
            raise MalformedResponseError("Expected a list in the response data")
        return data

    @staticmethod
    def _as_dict(data: Any) -> Dict[str, Any]:
        if not isinstance(data, dict):
            raise MalformedResponseError("Expected an object in the response data")
        return data
