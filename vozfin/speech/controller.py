"""Capture controller: one microphone session at a time.

The controller wraps a speech engine behind a small state machine:

    idle -> awaiting_permission -> ready -> listening -> idle

Public operations never raise. Every failure ends up as a message in
``session.error`` for the host to render.
"""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol
from urllib.parse import urlsplit

from vozfin.logging_setup import get_logger
from vozfin.speech.errors import (
    PERMISSION_MESSAGES,
    RETRY_FAILED_MESSAGE,
    START_FAILED_MESSAGE,
    UNSUPPORTED_MESSAGE,
    EngineAlreadyStarted,
    MicrophoneError,
    PermissionErrorKind,
    RecognitionErrorKind,
    describe_recognition_error,
)

logger = get_logger(__name__)

LOCAL_HOSTS = frozenset({"localhost", "127.0.0.1", "::1"})

ResultCallback = Callable[[str], None]
ErrorCallback = Callable[[str], None]


class PermissionState(str, Enum):
    UNKNOWN = "unknown"
    GRANTED = "granted"
    DENIED = "denied"


class CaptureState(str, Enum):
    IDLE = "idle"
    AWAITING_PERMISSION = "awaiting_permission"
    READY = "ready"
    LISTENING = "listening"


class SpeechEngine(Protocol):
    """Platform speech capability used by the controller."""

    supported: bool

    async def request_permission(self) -> None:
        """Acquire microphone access.

        Raises:
            MicrophoneError: If access could not be acquired.
        """
        ...

    async def start_session(self, on_result: ResultCallback, on_error: ErrorCallback) -> None:
        """Start recognition; exactly one callback fires when it ends.

        Raises:
            EngineAlreadyStarted: If a previous session is still running.
            EngineError: If recognition could not start.
        """
        ...

    def stop_session(self) -> None:
        """Stop the running recognition, if any."""
        ...


@dataclass
class CaptureSession:
    """State exposed to the host for rendering."""

    listening: bool = False
    transcript: str = ""
    permission: PermissionState = PermissionState.UNKNOWN
    error: str | None = None


def is_secure_origin(origin: str) -> bool:
    """Check whether microphone access may be requested from an origin.

    Args:
        origin: Origin URL the host is served from.

    Returns:
        True for https origins and local development hosts.
    """
    parsed = urlsplit(origin)
    return parsed.scheme == "https" or parsed.hostname in LOCAL_HOSTS


class CaptureController:
    """Manage permission and a single listening session on a speech engine."""

    def __init__(self, engine: SpeechEngine, origin: str = "http://localhost", retry_delay: float = 0.1) -> None:
        self.engine = engine
        self.origin = origin
        self.retry_delay = retry_delay
        self.session = CaptureSession()
        self.state = CaptureState.IDLE
        self._session_id = 0
        self._starting = False
        self._finished: asyncio.Event | None = None

        if not engine.supported:
            self.session.error = UNSUPPORTED_MESSAGE

    @property
    def supported(self) -> bool:
        return self.engine.supported

    async def request_permission(self) -> bool:
        """Ask for microphone access.

        Returns:
            True if permission was granted.
        """
        if self.session.listening:
            return self.session.permission is PermissionState.GRANTED

        if not is_secure_origin(self.origin):
            logger.warning("Refusing microphone access from insecure origin %s", self.origin)
            return self._deny(PermissionErrorKind.INSECURE_CONTEXT)

        if not self.engine.supported:
            return self._deny(PermissionErrorKind.UNSUPPORTED)

        self.state = CaptureState.AWAITING_PERMISSION
        try:
            await self.engine.request_permission()
        except MicrophoneError as e:
            logger.info("Microphone permission failed: %s", e)
            return self._deny(e.kind)
        except Exception:
            logger.exception("Unexpected error requesting microphone permission")
            return self._deny(PermissionErrorKind.UNKNOWN)

        self.session.permission = PermissionState.GRANTED
        self.session.error = None
        self.state = CaptureState.READY
        return True

    async def start_listening(self) -> None:
        """Start a listening session; ignored if one is already active."""
        if self.session.listening or self._starting:
            return

        if not self.engine.supported:
            self.session.error = UNSUPPORTED_MESSAGE
            return

        self._starting = True
        try:
            if self.session.permission is not PermissionState.GRANTED:
                if not await self.request_permission():
                    return

            self.session.error = None
            self.session.transcript = ""
            await self._start_engine()
        finally:
            self._starting = False

    def stop_listening(self) -> None:
        """Stop the active session. Safe to call at any time."""
        if not self.session.listening:
            return

        # Callbacks from the stopped session are dropped from here on.
        self._session_id += 1
        try:
            self.engine.stop_session()
        except Exception:
            logger.exception("Error stopping recognition")
        self._finish()

    def reset(self) -> None:
        """Clear transcript and error, keeping the permission state."""
        self.session.transcript = ""
        self.session.error = None

    async def wait_for_outcome(self) -> str | None:
        """Wait for the current session to end.

        Returns:
            The finalized transcript, or None if the session produced none.
        """
        if self.session.listening and self._finished is not None:
            await self._finished.wait()
        return self.session.transcript or None

    async def _start_engine(self) -> None:
        self._session_id += 1
        session_id = self._session_id

        def on_result(transcript: str) -> None:
            self._handle_result(session_id, transcript)

        def on_error(code: str) -> None:
            self._handle_error(session_id, code)

        self._finished = asyncio.Event()
        self.session.listening = True
        self.state = CaptureState.LISTENING

        try:
            await self.engine.start_session(on_result, on_error)
        except EngineAlreadyStarted:
            logger.info("Recognition already running, restarting in %.2fs", self.retry_delay)
            await self._retry_start(session_id, on_result, on_error)
        except Exception as e:
            logger.error("Error starting recognition: %s", e)
            self._fail_start(session_id, START_FAILED_MESSAGE)

    async def _retry_start(self, session_id: int, on_result: ResultCallback, on_error: ErrorCallback) -> None:
        try:
            self.engine.stop_session()
            await asyncio.sleep(self.retry_delay)
            if session_id != self._session_id:
                return
            await self.engine.start_session(on_result, on_error)
        except Exception as e:
            logger.error("Retry of recognition start failed: %s", e)
            self._fail_start(session_id, RETRY_FAILED_MESSAGE)

    def _fail_start(self, session_id: int, message: str) -> None:
        if session_id != self._session_id:
            return
        self.session.error = message
        self._finish()

    def _handle_result(self, session_id: int, transcript: str) -> None:
        if session_id != self._session_id or not self.session.listening:
            logger.debug("Ignoring result from finished session %d", session_id)
            return
        self.session.transcript = transcript.strip()
        self._finish()

    def _handle_error(self, session_id: int, code: str) -> None:
        if session_id != self._session_id or not self.session.listening:
            logger.debug("Ignoring error %r from finished session %d", code, session_id)
            return

        kind, message = describe_recognition_error(code)
        logger.warning("Speech recognition error: %s", code)
        self.session.error = message
        if kind is RecognitionErrorKind.NOT_ALLOWED:
            self.session.permission = PermissionState.DENIED
        self._finish()

    def _deny(self, kind: PermissionErrorKind) -> bool:
        self.session.permission = PermissionState.DENIED
        self.session.error = PERMISSION_MESSAGES[kind]
        self.state = CaptureState.IDLE
        return False

    def _finish(self) -> None:
        self.session.listening = False
        self.state = CaptureState.IDLE
        if self._finished is not None:
            self._finished.set()
