"""GitHub Models inference client."""

from dataclasses import dataclass
from typing import Dict, Optional
import logging

import httpx
from pydantic import ValidationError

from ghmodels.config import settings
from ghmodels.events import EventReader
from ghmodels.exceptions import EventDecodeError, ModelsHTTPError, format_http_error
from ghmodels.models import (
    ChatCompletion,
    ChatCompletionOptions,
    ChatCompletionResponse,
)

logger = logging.getLogger(__name__)

# Models that reject streamed responses
NON_STREAMING_MODELS = ("o1", "o1-mini", "o1-preview")

USER_AGENT = "github-cli-models"


@dataclass
class ModelsClientConfig:
    """Configurable settings for the models client."""

    inference_url: str = settings.inference_url
    timeout: float = settings.request_timeout


class ModelsClient:
    """Synchronous client for the chat completions endpoint."""

    def __init__(
        self,
        token: str,
        config: Optional[ModelsClientConfig] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize the models client.

        Args:
            token: Bearer token sent with every request
            config: Endpoint settings (default: values from the environment)
            http_client: HTTP client to send requests with (default: a new
                httpx.Client using the configured timeout). A client passed
                in stays open when this client is closed.
        """
        self.token = token
        self.config = config or ModelsClientConfig()
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=self.config.timeout)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self) -> None:
        """Close the client and the HTTP client it created."""
        if self._owns_client:
            self._client.close()

    def _build_headers(self) -> Dict[str, str]:
        """Build request headers."""
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
            # Send both spellings; consumers of the endpoint read either one.
            "x-ms-useragent": USER_AGENT,
            "x-ms-user-agent": USER_AGENT,
        }

    def get_chat_completion_stream(
        self, options: ChatCompletionOptions
    ) -> ChatCompletionResponse:
        """
        Request a chat completion.

        Streaming is switched on for every model except the o1 family, which
        does not support it; the caller's ``stream`` value is ignored.

        Args:
            options: Messages, model and sampling options

        Returns:
            ChatCompletionResponse whose ``reader`` must be closed by the caller
            when the response is streamed

        Raises:
            ModelsHTTPError: If the endpoint answers with a non-2xx status
            httpx.TransportError: If the request cannot be sent
        """
        stream = options.model not in NON_STREAMING_MODELS
        request = options.model_copy(update={"stream": stream})

        logger.debug(f"Requesting chat completion: model={request.model} stream={stream}")

        http_request = self._client.build_request(
            "POST",
            self.config.inference_url,
            headers=self._build_headers(),
            json=request.model_dump(mode="json", exclude_none=True),
        )
        response = self._client.send(http_request, stream=True)

        if not response.is_success:
            try:
                response.read()
                message = format_http_error(response)
            finally:
                response.close()
            logger.warning(f"Chat completion failed with status {response.status_code}")
            raise ModelsHTTPError(message, status_code=response.status_code)

        if stream:
            return ChatCompletionResponse(reader=EventReader(response, ChatCompletion))

        try:
            body = response.read()
        finally:
            response.close()

        try:
            completion = ChatCompletion.model_validate_json(body)
        except ValidationError as e:
            raise EventDecodeError(f"invalid completion payload: {e}") from e

        return ChatCompletionResponse(completion=completion)
