"""Conversation bookkeeping for chat requests."""

from dataclasses import dataclass, field
from typing import List, Union

from ghmodels.models import ChatMessage, ChatMessageRole


@dataclass
class Conversation:
    """A conversation between the user and the model."""

    system_prompt: str = ""
    messages: List[ChatMessage] = field(default_factory=list)

    def add_message(self, role: Union[ChatMessageRole, str], content: str) -> None:
        """Add a message to the conversation."""
        self.messages.append(ChatMessage(role=role, content=content))

    def get_messages(self) -> List[ChatMessage]:
        """Return the system prompt, if any, followed by the conversation turns."""
        messages = []
        if self.system_prompt:
            messages.append(
                ChatMessage(role=ChatMessageRole.SYSTEM, content=self.system_prompt)
            )
        messages.extend(self.messages)
        return messages

    def reset(self) -> None:
        """Remove all turns. The system prompt is kept."""
        self.messages = []
