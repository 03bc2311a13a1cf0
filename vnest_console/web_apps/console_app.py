#!/usr/bin/env python3
"""
FastAPI Combination Console
Server-rendered words and combinations tabs backed by the remote sentence-template API
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import List, Optional
import logging

from fastapi import APIRouter, Depends, FastAPI, Form, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from ..core.api_client import ApiClient
from ..core.config import ConsoleConfig, get_console_config
from ..core.models import WordType
from ..core.notifications import Notifier
from ..panels.console import (
    COMBINATIONS_TAB,
    SESSION_IDLE_SECONDS,
    WORDS_TAB,
    Console,
    ConsoleSessions,
)

logger = logging.getLogger(__name__)

CONFIRMED = 'yes'
SESSION_COOKIE = 'console_session'

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

router = APIRouter()


class ConsoleSession:
    """The calling browser's console, plus a notifier that lives for this request only"""

    def __init__(self, session_id: str, console: Console):
        self.session_id = session_id
        self.console = console
        self.notifier = Notifier()


def get_console_session(request: Request) -> ConsoleSession:
    sessions: ConsoleSessions = request.app.state.sessions
    session_id, console = sessions.get(request.cookies.get(SESSION_COOKIE))
    return ConsoleSession(session_id, console)


def render(request: Request, session: ConsoleSession, tab: str) -> HTMLResponse:
    """Render one tab for the calling session and hand it this request's notifications"""
    config: ConsoleConfig = request.app.state.config
    response = templates.TemplateResponse(request, f"{tab}.html", {
        "console": session.console,
        "active_tab": tab,
        "word_types": list(WordType),
        "notifications": session.notifier.drain(),
        "notification_ms": int(config.notification_seconds * 1000),
    })
    response.set_cookie(
        key=SESSION_COOKIE,
        value=session.session_id,
        max_age=SESSION_IDLE_SECONDS,
        httponly=True,
        secure=False,
        samesite="lax"
    )
    return response


@router.get("/")
async def home():
    return RedirectResponse(url="/words")


@router.get("/health")
async def health(request: Request):
    return {"status": "ok", "api_base": request.app.state.config.api_base}


# Words tab

@router.get("/words", response_class=HTMLResponse)
async def words_tab(request: Request, type: Optional[str] = Query(None),
                    session: ConsoleSession = Depends(get_console_session)):
    """Enter the words tab, optionally changing the type filter"""
    async with session.console.lock:
        await session.console.switch_tab(session.notifier, WORDS_TAB, word_filter=type)
        return render(request, session, WORDS_TAB)


@router.post("/words", response_class=HTMLResponse)
async def create_word(request: Request, text: str = Form(""), type: str = Form(""),
                      session: ConsoleSession = Depends(get_console_session)):
    async with session.console.lock:
        await session.console.word_panel.create(session.notifier, text, type)
        return render(request, session, WORDS_TAB)


@router.post("/words/{word_id}/delete", response_class=HTMLResponse)
async def delete_word(request: Request, word_id: int, confirmed: str = Form(""),
                      session: ConsoleSession = Depends(get_console_session)):
    async with session.console.lock:
        await session.console.word_panel.delete(session.notifier, word_id, confirmed == CONFIRMED)
        return render(request, session, WORDS_TAB)


# Combinations tab

@router.get("/combinations", response_class=HTMLResponse)
async def combinations_tab(request: Request, verb_id: Optional[str] = Query(None),
                           session: ConsoleSession = Depends(get_console_session)):
    """Enter the combinations tab: reload the list, every select's options and the preview"""
    async with session.console.lock:
        await session.console.switch_tab(session.notifier, COMBINATIONS_TAB, verb_filter=verb_id)
        return render(request, session, COMBINATIONS_TAB)


@router.post("/combinations", response_class=HTMLResponse)
async def create_combination(request: Request,
                             verb_id: str = Form(""),
                             subject_id: str = Form(""),
                             object_id: str = Form(""),
                             session: ConsoleSession = Depends(get_console_session)):
    async with session.console.lock:
        await session.console.combination_panel.create(session.notifier, verb_id, subject_id, object_id)
        return render(request, session, COMBINATIONS_TAB)


@router.post("/combinations/batch", response_class=HTMLResponse)
async def create_combinations_batch(request: Request,
                                    verb_id: str = Form(""),
                                    subject_ids: List[str] = Form([]),
                                    object_ids: List[str] = Form([]),
                                    session: ConsoleSession = Depends(get_console_session)):
    async with session.console.lock:
        await session.console.batch_creator.create(session.notifier, verb_id, subject_ids, object_ids)
        return render(request, session, COMBINATIONS_TAB)


@router.post("/combinations/check", response_class=HTMLResponse)
async def check_sentence(request: Request,
                         subject_id: str = Form(""),
                         verb_id: str = Form(""),
                         object_id: str = Form(""),
                         session: ConsoleSession = Depends(get_console_session)):
    """Ask the API whether a subject + verb + object sentence is allowed; changes nothing"""
    async with session.console.lock:
        await session.console.suggestion_preview.check(session.notifier, subject_id, verb_id, object_id)
        return render(request, session, COMBINATIONS_TAB)


@router.post("/combinations/{combination_id}/delete", response_class=HTMLResponse)
async def delete_combination(request: Request, combination_id: int, confirmed: str = Form(""),
                             session: ConsoleSession = Depends(get_console_session)):
    async with session.console.lock:
        await session.console.combination_panel.delete(
            session.notifier, combination_id, confirmed == CONFIRMED)
        return render(request, session, COMBINATIONS_TAB)


@router.post("/combinations/by-verb/{verb_id}/delete", response_class=HTMLResponse)
async def delete_combinations_for_verb(request: Request, verb_id: int, confirmed: str = Form(""),
                                       session: ConsoleSession = Depends(get_console_session)):
    async with session.console.lock:
        await session.console.combination_panel.delete_for_verb(
            session.notifier, verb_id, confirmed == CONFIRMED)
        return render(request, session, COMBINATIONS_TAB)


def create_app(config: Optional[ConsoleConfig] = None, client=None) -> FastAPI:
    """
    Build the console app.
    With an injected client the session store is ready immediately; otherwise
    the API session is opened at startup and closed at shutdown.
    """
    config = config or get_console_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if client is not None:
            yield
            return

        async with ApiClient(config.api_base, config.api_timeout) as api_client:
            app.state.sessions = ConsoleSessions(api_client)
            logger.info(f"Console ready against {config.api_base}")
            yield
        logger.info("Console shut down")

    app = FastAPI(title="Combination Console",
                  description="Manage words and sentence combinations",
                  lifespan=lifespan)
    app.state.config = config
    if client is not None:
        app.state.sessions = ConsoleSessions(client)
    app.include_router(router)
    return app
