#!/usr/bin/env python3
"""
Chat completion utilities for Newslingo.
Provides a client for OpenAI-compatible chat completion endpoints.
"""
from typing import List, Optional

import httpx


def extract_content(response_json):
    """Extract choices[0].message.content, treating absence as an empty string.

    Args:
        response_json: Decoded completion response

    Returns:
        str: Message content or ""
    """
    try:
        content = response_json["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return ""
    return content if isinstance(content, str) else ""


class ChatCompletionClient:
    """Client for an OpenAI-compatible chat completion API."""

    def __init__(self, api_key, model, api_url, timeout=60, transport=None):
        """Initialize the chat completion client.

        Args:
            api_key (str): API key sent as a bearer token
            model (str): The model to use
            api_url (str): Full URL of the chat completions endpoint
            timeout (float): Request timeout in seconds
            transport (httpx.AsyncBaseTransport, optional): Custom transport (tests)
        """
        self.api_key = api_key
        self.model = model
        self.api_url = api_url
        self.timeout = timeout
        self.transport = transport
        self.headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

    async def create(self, messages: List[dict], temperature: Optional[float] = None, max_tokens: Optional[int] = None):
        """Request a completion.

        Args:
            messages (list): [{"role": ..., "content": ...}, ...]
            temperature (float, optional): Sampling temperature
            max_tokens (int, optional): Maximum tokens for the response

        Returns:
            dict: Decoded response JSON

        Raises:
            httpx.HTTPStatusError: On non-2xx responses
            httpx.HTTPError: On transport failures
            ValueError: If the response body is not JSON
        """
        payload = {"model": self.model, "messages": messages}
        if temperature is not None:
            payload["temperature"] = temperature
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(self.api_url, headers=self.headers, json=payload)
            response.raise_for_status()
            return response.json()

    async def generate_completion(self, system_prompt, user_prompt, temperature=None, max_tokens=None):
        """Generate a completion for a system + user prompt pair.

        Returns:
            str: The message content, "" when absent
        """
        response_json = await self.create(
            [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        return extract_content(response_json)


def create_completion_client(api_key, model, api_url, timeout=60, transport=None):
    """Factory function to create a chat completion client.

    Returns:
        ChatCompletionClient: Configured client instance
    """
    return ChatCompletionClient(
        api_key=api_key,
        model=model,
        api_url=api_url,
        timeout=timeout,
        transport=transport,
    )
