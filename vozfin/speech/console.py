"""Terminal dictation engine.

Stands in for a platform recognizer when running from a terminal: the
operator types the utterance and it is delivered as the final transcript.
"""

import asyncio
import sys
import threading

from rich.console import Console
from rich.prompt import Prompt

from vozfin.logging_setup import get_logger
from vozfin.speech.controller import ErrorCallback, ResultCallback
from vozfin.speech.errors import EngineAlreadyStarted, MicrophoneError, PermissionErrorKind, RecognitionErrorKind

logger = get_logger(__name__)


class ConsoleSpeechEngine:
    """Speech engine that reads one typed utterance per session.

    The blocking prompt runs on a daemon thread, so stopping a session
    returns at once and never holds the event loop or the process open.
    A read still blocked when its session stops is handed to the next
    session instead of starting a second reader on the same stream.
    """

    supported = True

    def __init__(self, console: Console | None = None, language: str = "pt-BR") -> None:
        self.console = console or Console()
        self.language = language
        self._lock = threading.Lock()
        self._reader: threading.Thread | None = None
        self._pending: tuple[asyncio.AbstractEventLoop, ResultCallback, ErrorCallback] | None = None

    async def request_permission(self) -> None:
        if sys.stdin is None or sys.stdin.closed:
            raise MicrophoneError(PermissionErrorKind.NOT_FOUND, "no input stream available")

    async def start_session(self, on_result: ResultCallback, on_error: ErrorCallback) -> None:
        loop = asyncio.get_running_loop()
        with self._lock:
            if self._pending is not None:
                raise EngineAlreadyStarted("recognition has already started")
            self._pending = (loop, on_result, on_error)
            if self._reader is None:
                self._reader = threading.Thread(target=self._listen, name="vozfin-dictation", daemon=True)
                self._reader.start()

    def stop_session(self) -> None:
        with self._lock:
            self._pending = None

    def _listen(self) -> None:
        prompt = f"[magenta]🎤 Fale ({self.language})[/magenta]"
        try:
            text: str | None = Prompt.ask(prompt, console=self.console)
        except EOFError:
            text = None

        with self._lock:
            target = self._pending
            self._pending = None
            self._reader = None

        if target is None:
            logger.debug("Discarding dictation from a stopped session")
            return

        loop, on_result, on_error = target
        if text is None:
            callback, payload = on_error, RecognitionErrorKind.ABORTED.value
        elif not text.strip():
            callback, payload = on_error, RecognitionErrorKind.NO_SPEECH.value
        else:
            logger.debug("Dictated %d characters", len(text))
            callback, payload = on_result, text

        try:
            loop.call_soon_threadsafe(callback, payload)
        except RuntimeError:
            logger.debug("Event loop closed before dictation was delivered")
