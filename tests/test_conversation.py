"""Tests for conversation bookkeeping."""

from ghmodels.conversation import Conversation
from ghmodels.models import ChatMessageRole


class TestConversation:
    """Tests for Conversation."""

    def test_system_prompt_comes_first(self):
        """Test the system prompt leads the message list."""
        conversation = Conversation(system_prompt="You are a coding assistant")
        conversation.add_message(ChatMessageRole.USER, "Hello")
        conversation.add_message(ChatMessageRole.ASSISTANT, "Hi!")

        messages = conversation.get_messages()

        assert [m.role for m in messages] == ["system", "user", "assistant"]
        assert messages[0].content == "You are a coding assistant"
        assert messages[2].content == "Hi!"

    def test_no_system_prompt(self):
        """Test an empty system prompt is left out."""
        conversation = Conversation()
        conversation.add_message(ChatMessageRole.USER, "Hello")

        messages = conversation.get_messages()

        assert len(messages) == 1
        assert messages[0].role == "user"

    def test_get_messages_returns_copy(self):
        """Test callers cannot change the stored turns through the result."""
        conversation = Conversation(system_prompt="sys")
        conversation.add_message(ChatMessageRole.USER, "Hello")

        conversation.get_messages().clear()

        assert len(conversation.get_messages()) == 2

    def test_reset_keeps_system_prompt(self):
        """Test reset only drops the turns."""
        conversation = Conversation(system_prompt="sys")
        conversation.add_message(ChatMessageRole.USER, "Hello")

        conversation.reset()

        messages = conversation.get_messages()
        assert len(messages) == 1
        assert messages[0].role == "system"

    def test_accepts_plain_role_strings(self):
        """Test roles given as strings."""
        conversation = Conversation()
        conversation.add_message("user", "Hello")
        assert conversation.get_messages()[0].role == ChatMessageRole.USER
