"""The two-tab console: wires the panels together around one API client."""

import asyncio
import logging
import secrets
import time
from collections import OrderedDict
from typing import Optional, Tuple

from .batch_creator import BatchCombinationCreator
from .combination_panel import CombinationPanel
from .option_loader import OptionLoader
from .suggestion_preview import SuggestionPreview
from .word_panel import WordPanel

logger = logging.getLogger(__name__)

WORDS_TAB = 'words'
COMBINATIONS_TAB = 'combinations'
TABS = (WORDS_TAB, COMBINATIONS_TAB)

SESSION_IDLE_SECONDS = 60 * 60 * 24
MAX_SESSIONS = 256


class Console:
    """
    One browser session's view of the API: filters, loaded rows and form drafts.
    Notifications are not kept here; every operation reports to the notifier
    of the request that triggered it.
    """

    def __init__(self, client):
        self.client = client
        # Serializes requests from the same session so one never renders another's half-done state
        self.lock = asyncio.Lock()

        self.word_panel = WordPanel(client)
        self.combination_panel = CombinationPanel(client)
        self.option_loader = OptionLoader(client)
        self.batch_creator = BatchCombinationCreator(client, self.combination_panel)
        self.suggestion_preview = SuggestionPreview(client)

    async def switch_tab(self, notifier, tab: str, word_filter: Optional[str] = None,
                         verb_filter: Optional[str] = None) -> None:
        """Enter a tab and (re)fetch everything it displays"""
        if tab not in TABS:
            raise ValueError(f"Unknown tab: {tab}")
        logger.debug(f"Switched to {tab} tab")

        if tab == WORDS_TAB:
            await self.word_panel.load(notifier, word_filter)
        else:
            await asyncio.gather(
                self.combination_panel.load(notifier, verb_filter),
                self.option_loader.load(notifier),
                self.suggestion_preview.load(notifier),
            )


class ConsoleSessions:
    """
    In-memory session store: one Console per browser, all sharing the API client.
    Sessions idle for longer than idle_seconds are dropped, as is the least
    recently used one once max_sessions is reached.
    """

    def __init__(self, client, idle_seconds: float = SESSION_IDLE_SECONDS,
                 max_sessions: int = MAX_SESSIONS):
        self.client = client
        self.idle_seconds = idle_seconds
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, Tuple[Console, float]]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def get(self, session_id: Optional[str]) -> Tuple[str, Console]:
        """Return the console for a session id, starting a new session when it is unknown or expired"""
        now = time.monotonic()
        self._expire(now)

        if session_id and session_id in self._sessions:
            console, _ = self._sessions.pop(session_id)
            self._sessions[session_id] = (console, now)
            return session_id, console

        session_id = secrets.token_urlsafe(32)
        console = Console(self.client)
        self._sessions[session_id] = (console, now)
        while len(self._sessions) > self.max_sessions:
            self._sessions.popitem(last=False)
        logger.debug(f"Started console session ({len(self._sessions)} active)")
        return session_id, console

    def _expire(self, now: float) -> None:
        # Oldest first, so stop at the first session still in use
        while self._sessions:
            session_id, (_, last_seen) = next(iter(self._sessions.items()))
            if now - last_seen <= self.idle_seconds:
                break
            del self._sessions[session_id]
