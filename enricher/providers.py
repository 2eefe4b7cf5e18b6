#!/usr/bin/env python3
"""
Provider adapters for Newslingo.

Both providers expose ``invoke(text, target_language) -> str`` and raise a
ProviderError subclass on failure:
- FastTranslationProvider: LibreTranslate, reached through the proxy boundary
- ModelProvider: OpenAI-compatible chat completions
"""
from typing import Dict, Optional

import httpx

from config import (
    LIBRETRANSLATE_API_KEY, LIBRETRANSLATE_ORIGIN, LIBRETRANSLATE_PATH,
    LIBRETRANSLATE_PROTOCOL, MODEL_API_URL, MODEL_MAX_TOKENS, MODEL_NAME,
    MODEL_TEMPERATURE, MODEL_TIMEOUT, NETWORK_TIMEOUT, OPENAI_API_KEY,
    TRANSLATE_PROXY_URL, TRANSLATOR_PROMPT_PATH
)
from enricher.errors import EmptyOutput, NetworkFailure, ParseFailure, ProviderError
from enricher.models import SOURCE_LANGUAGE, TargetLanguage
from enricher.prompts import TRANSLATOR_PROMPT_EN, TRANSLATOR_PROMPT_TR
from utils.completion_utils import ChatCompletionClient, create_completion_client
from utils.logging_utils import handle_request_error
from utils.prompt_utils import load_prompt
from utils.proxy_utils import ProxyClient, ProxyRequest, json_body


class FastTranslationProvider:
    """Translation-only endpoint (LibreTranslate API)."""

    name = 'LibreTranslate'

    def __init__(self, proxy_client: ProxyClient, origin='libretranslate.com', path='/translate', protocol='https', api_key=''):
        """Initialize the fast provider.

        Args:
            proxy_client (ProxyClient): Network boundary used for every request
            origin (str): Host of the LibreTranslate instance
            path (str): Path of the translate endpoint
            protocol (str): "https" or "http"
            api_key (str): LibreTranslate API key, may be empty
        """
        self.proxy_client = proxy_client
        self.origin = origin
        self.path = path
        self.protocol = protocol
        self.api_key = api_key

    def build_request(self, text, target_language) -> ProxyRequest:
        target = TargetLanguage.parse(target_language, default=target_language)
        return ProxyRequest(
            protocol=self.protocol,
            origin=self.origin,
            path=self.path,
            method='POST',
            headers={'Content-Type': 'application/json'},
            body=json_body({
                'q': text,
                'source': SOURCE_LANGUAGE.value,
                'target': getattr(target, 'value', target),
                'format': 'text',
                'api_key': self.api_key,
            }),
        )

    async def invoke(self, text, target_language) -> str:
        """Translate text from English.

        Raises:
            NetworkFailure: Transport error or non-2xx status
            ParseFailure: Response body is not JSON
            EmptyOutput: translatedText is absent or blank
        """
        try:
            response = await self.proxy_client.forward(self.build_request(text, target_language))
        except httpx.HTTPError as e:
            raise NetworkFailure(f"{self.name} request failed: {e}") from e

        if not response.is_success:
            raise NetworkFailure(handle_request_error('FastProvider', response, f"{self.name} API error."))

        try:
            data = response.json()
        except ValueError as e:
            raise ParseFailure(f"{self.name} returned malformed JSON") from e

        translated = data.get('translatedText') if isinstance(data, dict) else None
        if not isinstance(translated, str) or not translated.strip():
            raise EmptyOutput(f"{self.name} returned an empty translation")

        return translated


class ModelProvider:
    """Chat-completion model used as the fallback translator and as the summarizer."""

    name = 'ChatCompletion'

    def __init__(self, client: ChatCompletionClient, temperature: Optional[float] = None, max_tokens: Optional[int] = None,
                 translation_prompts: Optional[Dict[TargetLanguage, str]] = None):
        """Initialize the model provider.

        Args:
            client (ChatCompletionClient): Completion endpoint client
            temperature (float, optional): Default sampling temperature
            max_tokens (int, optional): Default response token limit
            translation_prompts (dict, optional): System prompt per target language
        """
        self.client = client
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.translation_prompts = translation_prompts or {
            TargetLanguage.TURKISH: TRANSLATOR_PROMPT_TR,
            TargetLanguage.ENGLISH: TRANSLATOR_PROMPT_EN,
        }

    async def complete(self, system_prompt, content, temperature=None, max_tokens=None) -> str:
        """Run one system + user completion and return the message content.

        Raises:
            ProviderError: No API key configured
            NetworkFailure: Transport error, non-2xx status or non-JSON body
            EmptyOutput: Content is absent or blank
        """
        if not self.client.api_key:
            raise ProviderError("Model API key is not configured")

        try:
            result = await self.client.generate_completion(
                system_prompt,
                content,
                temperature=self.temperature if temperature is None else temperature,
                max_tokens=self.max_tokens if max_tokens is None else max_tokens,
            )
        except httpx.HTTPStatusError as e:
            raise NetworkFailure(handle_request_error('ModelProvider', e.response, f"{self.name} API error.")) from e
        except httpx.HTTPError as e:
            raise NetworkFailure(f"{self.name} request failed: {e}") from e
        except ValueError as e:
            raise NetworkFailure(f"{self.name} returned malformed JSON") from e

        if not result.strip():
            raise EmptyOutput(f"{self.name} returned no content")
        return result

    async def invoke(self, text, target_language) -> str:
        """Translate text with the language's translation instruction."""
        language = TargetLanguage.parse(target_language, default=TargetLanguage.TURKISH)
        return await self.complete(self.translation_prompts[language], text)


def create_fast_provider(transport=None):
    """Build the LibreTranslate provider from config."""
    return FastTranslationProvider(
        ProxyClient(TRANSLATE_PROXY_URL, timeout=NETWORK_TIMEOUT, transport=transport),
        origin=LIBRETRANSLATE_ORIGIN,
        path=LIBRETRANSLATE_PATH,
        protocol=LIBRETRANSLATE_PROTOCOL,
        api_key=LIBRETRANSLATE_API_KEY,
    )


def create_model_provider(transport=None):
    """Build the chat-completion provider from config."""
    client = create_completion_client(
        api_key=OPENAI_API_KEY,
        model=MODEL_NAME,
        api_url=MODEL_API_URL,
        timeout=MODEL_TIMEOUT,
        transport=transport,
    )
    return ModelProvider(
        client,
        temperature=MODEL_TEMPERATURE,
        max_tokens=MODEL_MAX_TOKENS,
        translation_prompts={
            TargetLanguage.TURKISH: load_prompt(TRANSLATOR_PROMPT_PATH, default=TRANSLATOR_PROMPT_TR),
            TargetLanguage.ENGLISH: TRANSLATOR_PROMPT_EN,
        },
    )
