"""Error kinds and user-facing messages for speech capture.

Engines raise the exceptions defined here; the capture controller turns
them into messages on the session and never lets them escape.
"""

from enum import Enum


class PermissionErrorKind(str, Enum):
    DENIED = "denied"
    NOT_FOUND = "not-found"
    BUSY = "busy"
    OVERCONSTRAINED = "overconstrained"
    SECURITY = "security"
    INSECURE_CONTEXT = "insecure-context"
    UNSUPPORTED = "unsupported"
    UNKNOWN = "unknown"


class RecognitionErrorKind(str, Enum):
    NO_SPEECH = "no-speech"
    AUDIO_CAPTURE = "audio-capture"
    NETWORK = "network"
    ABORTED = "aborted"
    NOT_ALLOWED = "not-allowed"
    UNKNOWN = "unknown"


PERMISSION_MESSAGES: dict[PermissionErrorKind, str] = {
    PermissionErrorKind.DENIED: (
        "Você negou o acesso ao microfone. Para usar este recurso, libere o microfone "
        "nas configurações do sistema e tente novamente."
    ),
    PermissionErrorKind.NOT_FOUND: "Nenhum microfone foi encontrado. Conecte um microfone e tente novamente.",
    PermissionErrorKind.BUSY: (
        "Não foi possível acessar o microfone. Ele pode estar sendo usado por outro aplicativo."
    ),
    PermissionErrorKind.OVERCONSTRAINED: (
        "As configurações de áudio solicitadas não são suportadas pelo seu microfone."
    ),
    PermissionErrorKind.SECURITY: "Erro de segurança ao acessar o microfone. Verifique se está usando HTTPS.",
    PermissionErrorKind.INSECURE_CONTEXT: "O reconhecimento de voz requer uma conexão segura (HTTPS).",
    PermissionErrorKind.UNSUPPORTED: "Seu ambiente não suporta acesso ao microfone.",
    PermissionErrorKind.UNKNOWN: "Erro desconhecido ao solicitar permissão do microfone. Tente novamente.",
}

RECOGNITION_MESSAGES: dict[RecognitionErrorKind, str] = {
    RecognitionErrorKind.NO_SPEECH: "Nenhuma fala detectada. Tente novamente.",
    RecognitionErrorKind.AUDIO_CAPTURE: "Microfone não encontrado. Verifique se está conectado.",
    RecognitionErrorKind.NETWORK: "Erro de conexão. Verifique sua internet.",
    RecognitionErrorKind.ABORTED: "Gravação cancelada.",
    RecognitionErrorKind.NOT_ALLOWED: (
        "Permissão de microfone negada. Por favor, permita o acesso ao microfone nas configurações."
    ),
}

UNSUPPORTED_MESSAGE = "Reconhecimento de voz não suportado neste ambiente."
START_FAILED_MESSAGE = "Erro ao iniciar gravação. Verifique as permissões do microfone."
RETRY_FAILED_MESSAGE = "Erro ao iniciar gravação. Tente novamente."


class SpeechError(Exception):
    """Base class for speech engine failures."""


class MicrophoneError(SpeechError):
    """Microphone access could not be acquired."""

    def __init__(self, kind: PermissionErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(detail or kind.value)


class EngineError(SpeechError):
    """The recognition engine failed to start."""


class EngineAlreadyStarted(EngineError):
    """The recognition engine is still running a previous session."""


def describe_recognition_error(code: str) -> tuple[RecognitionErrorKind, str]:
    """Map an engine error code to its kind and message.

    Args:
        code: Error code reported by the engine (e.g. "no-speech").

    Returns:
        Tuple of (kind, message). Unrecognized codes map to UNKNOWN and
        keep the raw code in the message.
    """
    try:
        kind = RecognitionErrorKind(code)
    except ValueError:
        return RecognitionErrorKind.UNKNOWN, f"Erro no reconhecimento: {code}"

    if kind is RecognitionErrorKind.UNKNOWN:
        return kind, f"Erro no reconhecimento: {code}"
    return kind, RECOGNITION_MESSAGES[kind]
