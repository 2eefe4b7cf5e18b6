#!/usr/bin/env python3
"""
Module for summarizing news items and classifying their sentiment.

One Summarizer serves both output languages; a LanguageProfile carries the
prompt and the language-specific cleanup. summarize() never raises and falls
back, in order, to:
1. the model's JSON summary
2. the model's raw text, when it is not JSON
3. a plain translation of the title
4. the title itself
"""
import asyncio
import json
import re
from typing import Optional

from config import (
    SUMMARIZER_PROMPT_PATH_EN, SUMMARIZER_PROMPT_PATH_TR, SUMMARY_RETRY, TITLE_RETRY
)
from enricher.errors import ParseFailure
from enricher.leakage import scrub_leakage
from enricher.models import (
    EnrichmentRequest, LanguageProfile, Sentiment, SummaryResult, TargetLanguage, build_content
)
from enricher.normalizer import MIN_TEXT_LENGTH
from enricher.prompts import SUMMARIZER_PROMPT_EN, SUMMARIZER_PROMPT_TR
from enricher.providers import create_model_provider
from enricher.translator import create_translator
from utils.json_utils import parse_json_response
from utils.logging_utils import log_error, log_info, log_warning
from utils.prompt_utils import load_prompt
from utils.retry_utils import RetryPolicy, retry_async

SUMMARY_TEMPERATURE = 0.3
SUMMARY_MAX_TOKENS = 500

# A translated title shorter than this is only kept if it changed
MIN_TITLE_TRANSLATION_LENGTH = 8

TURKISH_CHARS = r'[üğışöçÜĞİŞÖÇ]'


def turkish_profile() -> LanguageProfile:
    return LanguageProfile(
        language=TargetLanguage.TURKISH,
        system_prompt=load_prompt(SUMMARIZER_PROMPT_PATH_TR, default=SUMMARIZER_PROMPT_TR),
        enforce_leakage_scrub=True,
        distinctive_chars=TURKISH_CHARS,
    )


def english_profile() -> LanguageProfile:
    return LanguageProfile(
        language=TargetLanguage.ENGLISH,
        system_prompt=load_prompt(SUMMARIZER_PROMPT_PATH_EN, default=SUMMARIZER_PROMPT_EN),
    )


class Summarizer:
    """Summarization orchestrator for one output language."""

    def __init__(self, profile: LanguageProfile, model_provider, translator,
                 policy: Optional[RetryPolicy] = None, title_policy: Optional[RetryPolicy] = None,
                 sleep=asyncio.sleep):
        """Initialize the summarizer.

        Args:
            profile (LanguageProfile): Prompt and cleanup rules for the output language
            model_provider: Provider with an async ``complete(system_prompt, content, ...)``
            translator (Translator): Used for the title-only fallback
            policy (RetryPolicy, optional): Retry policy for the summary request
            title_policy (RetryPolicy, optional): Retry policy for the title fallback
            sleep: Awaitable sleep used between retries
        """
        self.profile = profile
        self.model_provider = model_provider
        self.translator = translator
        self.policy = policy or SUMMARY_RETRY
        self.title_policy = title_policy or TITLE_RETRY
        self.sleep = sleep

    async def summarize(self, title, body=None) -> SummaryResult:
        """Summarize a news item and classify its sentiment.

        Args:
            title (str): News title
            body (str, optional): News body; the title alone is used when absent

        Returns:
            SummaryResult: Always a valid result; degrades to (title, neutral)
        """
        title = title or ""
        try:
            content = build_content(title, body)
            if not content.strip():
                return SummaryResult(title, Sentiment.NEUTRAL)

            for tier in (self._try_model_summary, self._try_title_translation):
                result = await tier(title, content)
                if result is not None:
                    return result
        except Exception as e:
            log_error('Summarizer', "Unexpected summarization error", e)

        return SummaryResult(title, Sentiment.NEUTRAL)

    async def _try_model_summary(self, title, content) -> Optional[SummaryResult]:
        try:
            raw = await retry_async(
                lambda: self.model_provider.complete(
                    self.profile.system_prompt,
                    content,
                    temperature=SUMMARY_TEMPERATURE,
                    max_tokens=SUMMARY_MAX_TOKENS,
                ),
                self.policy,
                module_name='Summarizer',
                context=f"{self.profile.language.value} summary",
                sleep=self.sleep,
            )
            return self.parse_summary(raw, title)
        except Exception as e:
            log_warning('Summarizer', f"Summarization failed, falling back to title translation: {e}")
            return None

    def parse_summary(self, raw, title) -> SummaryResult:
        """Turn raw model output into a SummaryResult.

        Raises:
            ParseFailure: Output is neither JSON nor long enough to use as-is
        """
        try:
            parsed = parse_json_response(raw)
        except json.JSONDecodeError as e:
            if raw and len(raw) > MIN_TEXT_LENGTH:
                log_info('Summarizer', "Model output is not JSON, using it as the summary")
                return SummaryResult(raw, Sentiment.NEUTRAL)
            raise ParseFailure(f"unusable model output: {raw!r}") from e

        if not isinstance(parsed, dict):
            parsed = {}

        summary = parsed.get('summary')
        if isinstance(summary, str) and self.profile.enforce_leakage_scrub:
            summary = scrub_leakage(summary)

        if not isinstance(summary, str) or len(summary) <= MIN_TEXT_LENGTH:
            summary = title

        return SummaryResult(summary, Sentiment.coerce(parsed.get('sentiment')))

    async def _try_title_translation(self, title, content) -> Optional[SummaryResult]:
        try:
            translated = await retry_async(
                lambda: self.translator.translate(title, self.profile.language),
                self.title_policy,
                module_name='Summarizer',
                context='title translation',
                sleep=self.sleep,
            )
        except Exception as e:
            log_error('Summarizer', "Title translation fallback failed", e)
            return None

        if translated and self._accept_title_translation(title, translated):
            return SummaryResult(translated, Sentiment.NEUTRAL)

        log_warning('Summarizer', f"Translation could not be verified, using original: {title[:50]}")
        return None

    def _accept_title_translation(self, title, translated) -> bool:
        is_different = translated.lower() != title.lower()
        is_long_enough = len(translated) > MIN_TITLE_TRANSLATION_LENGTH
        has_distinctive_chars = bool(
            self.profile.distinctive_chars and re.search(self.profile.distinctive_chars, translated)
        )
        return is_different or is_long_enough or has_distinctive_chars


def create_summarizer(profile: LanguageProfile, transport=None, sleep=asyncio.sleep) -> Summarizer:
    """Build a summarizer from config for the given language profile."""
    return Summarizer(
        profile,
        create_model_provider(transport),
        create_translator(transport, sleep=sleep),
        sleep=sleep,
    )


async def summarize_and_translate(title, body=None) -> SummaryResult:
    """Summarize a news item in Turkish and analyze its sentiment."""
    return await create_summarizer(turkish_profile()).summarize(title, body)


async def summarize_in_english(title, body=None) -> SummaryResult:
    """Summarize a news item in English and analyze its sentiment."""
    return await create_summarizer(english_profile()).summarize(title, body)


async def enrich(request: EnrichmentRequest) -> SummaryResult:
    """Summarize a request in its target language. Never raises."""
    if TargetLanguage.parse(request.target_language) == TargetLanguage.ENGLISH:
        return await summarize_in_english(request.title, request.body)
    return await summarize_and_translate(request.title, request.body)
