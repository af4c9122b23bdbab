"""Speech capture: controller state machine, engines and error messages."""

from vozfin.speech.controller import (
    CaptureController,
    CaptureSession,
    CaptureState,
    PermissionState,
    SpeechEngine,
    is_secure_origin,
)
from vozfin.speech.errors import (
    EngineAlreadyStarted,
    EngineError,
    MicrophoneError,
    PermissionErrorKind,
    RecognitionErrorKind,
)

__all__ = [
    "CaptureController",
    "CaptureSession",
    "CaptureState",
    "EngineAlreadyStarted",
    "EngineError",
    "MicrophoneError",
    "PermissionErrorKind",
    "PermissionState",
    "RecognitionErrorKind",
    "SpeechEngine",
    "is_secure_origin",
]
