#!/usr/bin/env python3
"""Streaming example for the GitHub Models client."""

from ghmodels import ChatCompletionOptions, ChatMessageRole, Conversation, ModelsClient
from ghmodels.auth import token_for_host


def main():
    conversation = Conversation(system_prompt="You are a coding assistant")
    conversation.add_message(
        ChatMessageRole.USER, "How do I get the length of a string in Python?"
    )

    print("=== Streaming Chat ===")
    print("-" * 40)

    with ModelsClient(token_for_host("github.com")) as client:
        response = client.get_chat_completion_stream(
            ChatCompletionOptions(
                messages=conversation.get_messages(),
                model="openai/gpt-4.1",
            )
        )

        with response.reader as reader:
            for completion in reader:
                for choice in completion.choices:
                    if choice.delta and choice.delta.content:
                        print(choice.delta.content, end="", flush=True)

    print("\n" + "-" * 40)
    print("Stream complete!")


if __name__ == "__main__":
    main()
