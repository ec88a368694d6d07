"""GitHub Models data models."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ghmodels.events import Reader


class ChatMessageRole(str, Enum):
    """Role of a chat message."""

    ASSISTANT = "assistant"
    SYSTEM = "system"
    USER = "user"


class ChatMessage(BaseModel):
    """A single message in a chat conversation."""

    model_config = ConfigDict(use_enum_values=True)

    role: ChatMessageRole
    content: Optional[str] = None


class ChatCompletionOptions(BaseModel):
    """Options for a chat completion request."""

    messages: List[ChatMessage]
    model: str
    stream: bool = False
    max_tokens: Optional[int] = Field(default=None, gt=0)
    temperature: Optional[float] = Field(default=None, ge=0, le=2)
    top_p: Optional[float] = Field(default=None, ge=0, le=1)


class ChatChoiceDelta(BaseModel):
    """Incremental content for streaming."""

    content: Optional[str] = None
    role: Optional[str] = None


class ChatChoiceMessage(BaseModel):
    """A full message from a non-streamed choice."""

    content: Optional[str] = None
    role: Optional[str] = None


class ChatChoice(BaseModel):
    """A single choice in a chat completion."""

    delta: Optional[ChatChoiceDelta] = None
    finish_reason: Optional[str] = None
    index: int = 0
    message: Optional[ChatChoiceMessage] = None


class ChatCompletion(BaseModel):
    """A chat completion, or one chunk of a streamed one."""

    choices: List[ChatChoice] = Field(default_factory=list)


@dataclass
class ChatCompletionResponse:
    """Response to a chat completion request.

    ``reader`` is set when the response is streamed; ``completion`` holds the
    decoded body otherwise.
    """

    reader: Optional[Reader[ChatCompletion]] = None
    completion: Optional[ChatCompletion] = None
