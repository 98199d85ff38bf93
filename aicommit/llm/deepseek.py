"""DeepSeek Chat Completion Client"""

import http.client
import json
import urllib.error
import urllib.request

from aicommit.llm.base import ChatRequest, ChatResponse, LLMError, LLMResponse, build_request


class DeepSeekClient:
    """DeepSeek API client. The API key is passed in by the caller."""

    DEFAULT_MODEL = "deepseek-chat"
    ENDPOINT = "https://api.deepseek.com/chat/completions"

    def __init__(self, api_key: str, model: str | None = None, endpoint: str | None = None):
        if not api_key:
            raise LLMError("No API key provided for DeepSeek")
        self.api_key = api_key
        self.model = model or self.DEFAULT_MODEL
        self.endpoint = endpoint or self.ENDPOINT

    @property
    def name(self) -> str:
        return f"DeepSeek ({self.model})"

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def complete(self, request: ChatRequest) -> ChatResponse:
        """POST one request and parse the reply. Blocks until the server answers."""
        data = json.dumps(request.to_dict()).encode('utf-8')
        req = urllib.request.Request(self.endpoint, data=data, headers=self._headers(), method="POST")

        try:
            with urllib.request.urlopen(req) as response:
                body = json.loads(response.read().decode('utf-8'))
        except urllib.error.HTTPError as e:
            raise LLMError(f"DeepSeek API error ({e.code}): {e.reason}")
        except urllib.error.URLError as e:
            raise LLMError(f"DeepSeek request failed: {e.reason}")
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise LLMError(f"Invalid response from DeepSeek: {e}")
        except http.client.HTTPException as e:
            raise LLMError(f"Incomplete response from DeepSeek: {e}")
        except OSError as e:
            raise LLMError(f"Connection to DeepSeek lost: {e}")

        return ChatResponse.from_dict(body)

    def generate(self, diff: str) -> LLMResponse:
        """Ask for a commit message describing ``diff``.

        Returns the first choice's content exactly as sent by the server.
        """
        response = self.complete(build_request(diff, self.model))
        if not response.choices:
            raise LLMError("No response from DeepSeek")

        return LLMResponse(
            content=response.choices[0].message.content,
            model=response.model or self.model,
            tokens_used=response.usage.total_tokens,
        )
