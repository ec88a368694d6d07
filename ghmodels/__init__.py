"""GitHub Models chat client with streamed completions."""

from ghmodels.client import ModelsClient, ModelsClientConfig
from ghmodels.conversation import Conversation
from ghmodels.events import EventReader, Reader
from ghmodels.models import (
    ChatMessage,
    ChatMessageRole,
    ChatCompletionOptions,
    ChatCompletion,
    ChatCompletionResponse,
)
from ghmodels.exceptions import (
    ModelsError,
    ModelsHTTPError,
    AuthenticationError,
    StreamError,
    EventDecodeError,
    UnexpectedEventError,
    IncompleteStreamError,
)

__version__ = "0.1.0"
__all__ = [
    "ModelsClient",
    "ModelsClientConfig",
    "Conversation",
    "EventReader",
    "Reader",
    "ChatMessage",
    "ChatMessageRole",
    "ChatCompletionOptions",
    "ChatCompletion",
    "ChatCompletionResponse",
    "ModelsError",
    "ModelsHTTPError",
    "AuthenticationError",
    "StreamError",
    "EventDecodeError",
    "UnexpectedEventError",
    "IncompleteStreamError",
]
