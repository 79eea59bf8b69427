"""Scoped ownership of one Office automation server instance."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from pdfcreator.converter.models import AutomationStartError

logger = logging.getLogger(__name__)

ApplicationFactory = Callable[[str], Any]


class SessionState(str, Enum):
    """Lifecycle of a session. Any failure after start jumps to ended."""

    not_started = "not_started"
    started = "started"
    document_open = "document_open"
    exported = "exported"
    closed = "closed"
    ended = "ended"


def dispatch_application(prog_id: str) -> Any:
    """Launch a new, private instance of a COM automation server.

    Uses DispatchEx so an Office instance the user already has open is
    never attached to or shut down.
    """
    try:
        import win32com.client
    except ImportError as e:
        raise AutomationStartError(
            prog_id, "pywin32 is not installed (Office automation requires Windows)"
        ) from e

    try:
        return win32com.client.DispatchEx(prog_id)
    except Exception as e:
        raise AutomationStartError(prog_id, e) from e


class AutomationSession:
    """Owns one application instance from launch until Quit().

    Quit() runs exactly once on every exit path of the ``with`` block. A
    failing Quit() is logged and kept on ``quit_error`` instead of masking
    whatever happened inside the block.
    """

    def __init__(
        self,
        prog_id: str,
        factory: ApplicationFactory = dispatch_application,
    ) -> None:
        self.prog_id = prog_id
        self._factory = factory
        self.application: Any = None
        self.state = SessionState.not_started
        self.quit_error: Exception | None = None

    def __enter__(self) -> AutomationSession:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.end()

    def start(self) -> Any:
        if self.state is not SessionState.not_started:
            raise RuntimeError(f"Session for {self.prog_id} already {self.state.value}")

        logger.debug("starting %s", self.prog_id)
        try:
            self.application = self._factory(self.prog_id)
        except AutomationStartError:
            raise
        except Exception as e:
            raise AutomationStartError(self.prog_id, e) from e

        self.state = SessionState.started
        return self.application

    def advance(self, state: SessionState) -> None:
        logger.debug("%s: %s -> %s", self.prog_id, self.state.value, state.value)
        self.state = state

    def end(self) -> None:
        if self.state in (SessionState.not_started, SessionState.ended):
            return

        application, self.application = self.application, None
        self.state = SessionState.ended
        try:
            application.Quit()
        except Exception as e:
            self.quit_error = e
            logger.warning("Failed to quit %s: %s", self.prog_id, e)
        else:
            logger.debug("quit %s", self.prog_id)
