#!/usr/bin/env python3
"""
Module for translating news text, LibreTranslate first and the chat model as fallback.

translate() never raises: when every provider fails it returns the cleaned
input, and when nothing usable survives cleaning it returns the input itself.
"""
import asyncio
from typing import List, Optional

from config import FAST_TRANSLATE_RETRY, MODEL_TRANSLATE_RETRY
from enricher.errors import ValidationFailure
from enricher.models import SOURCE_LANGUAGE, TargetLanguage
from enricher.normalizer import MIN_TEXT_LENGTH, normalize
from enricher.providers import create_fast_provider, create_model_provider
from utils.logging_utils import log_error, log_warning
from utils.retry_utils import RetryPolicy, retry_async


def _degraded(text):
    """Best available text without any provider: cleaned, else the raw input."""
    return normalize(text) or (text or "")


class Translator:
    """Translation orchestrator over a fast provider and a model provider."""

    def __init__(self, fast_provider, model_provider, fast_policy: Optional[RetryPolicy] = None,
                 fallback_policy: Optional[RetryPolicy] = None, sleep=asyncio.sleep):
        self.fast_provider = fast_provider
        self.model_provider = model_provider
        self.fast_policy = fast_policy or FAST_TRANSLATE_RETRY
        self.fallback_policy = fallback_policy or MODEL_TRANSLATE_RETRY
        self.sleep = sleep

    async def translate(self, text, target_language=TargetLanguage.TURKISH) -> str:
        """Translate text into the target language.

        Args:
            text (str): Raw text, possibly HTML
            target_language (TargetLanguage | str): "tr" or "en"

        Returns:
            str: Translation, cleaned input or raw input, in that order of preference
        """
        try:
            language = TargetLanguage.parse(target_language)
            if language is None:
                log_warning('Translator', f"Unknown target language {target_language!r}, returning cleaned text")
                return _degraded(text)

            if language == SOURCE_LANGUAGE:
                return _degraded(text)

            return await self._translate(text, language)
        except Exception as e:
            log_error('Translator', "Unexpected translation error", e)
            return _degraded(text)

    async def _translate(self, text, language) -> str:
        if not text or not text.strip():
            return text or ""

        clean_text = normalize(text)
        if not clean_text:
            return text

        for tier in (self._try_fast_provider, self._try_model_provider):
            translation = await tier(clean_text, language)
            if translation:
                return translation

        log_warning('Translator', "All providers failed, returning cleaned text")
        return clean_text

    async def _try_fast_provider(self, clean_text, language) -> Optional[str]:
        try:
            translation = await retry_async(
                lambda: self.fast_provider.invoke(clean_text, language),
                self.fast_policy,
                module_name='Translator',
                context='LibreTranslate translation',
                sleep=self.sleep,
            )
            if translation.lower() == clean_text.lower() or len(translation) <= MIN_TEXT_LENGTH:
                raise ValidationFailure("translation is unchanged or too short")
            return translation
        except Exception as e:
            log_warning('Translator', f"LibreTranslate failed, trying model fallback: {e}")
            return None

    async def _try_model_provider(self, clean_text, language) -> Optional[str]:
        try:
            translation = await retry_async(
                lambda: self.model_provider.invoke(clean_text, language),
                self.fallback_policy,
                module_name='Translator',
                context='model translation',
                sleep=self.sleep,
            )
            if len(translation) <= MIN_TEXT_LENGTH:
                raise ValidationFailure("model translation is too short")

            # Models occasionally echo markup or links
            cleaned = normalize(translation)
            if not cleaned:
                raise ValidationFailure("model translation is empty after cleaning")
            return cleaned
        except Exception as e:
            log_warning('Translator', f"Model translation also failed: {e}")
            return None

    async def translate_batch(self, texts: List[str], target_language=TargetLanguage.TURKISH) -> List[str]:
        """Translate texts concurrently; results keep the input order.

        Each item fails independently and degrades to its own cleaned text.
        """
        results = await asyncio.gather(
            *(self.translate(text, target_language) for text in texts),
            return_exceptions=True,
        )
        translations = []
        for text, result in zip(texts, results):
            if isinstance(result, BaseException):
                log_error('Translator', "Batch item failed", result)
                translations.append(_degraded(text))
            else:
                translations.append(result)
        return translations


def create_translator(transport=None, sleep=asyncio.sleep) -> Translator:
    """Build a translator from config. A fresh instance per call keeps requests independent."""
    return Translator(
        create_fast_provider(transport),
        create_model_provider(transport),
        sleep=sleep,
    )


async def translate(text, target_language=TargetLanguage.TURKISH) -> str:
    """Translate text to the target language. English returns cleaned text."""
    return await create_translator().translate(text, target_language)


# Name used by the minting flow
translate_text = translate


async def translate_to_turkish(text) -> str:
    """Translate text to Turkish using LibreTranslate with a model fallback."""
    return await create_translator().translate(text, TargetLanguage.TURKISH)


async def translate_batch(texts, target_language=TargetLanguage.TURKISH) -> List[str]:
    """Translate multiple texts concurrently, preserving order."""
    return await create_translator().translate_batch(list(texts), target_language)
