#!/usr/bin/env python3
"""
Value types for the enrichment pipeline.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

MAX_CONTENT_LENGTH = 2000
TRUNCATION_MARKER = '...'
CONTENT_SEPARATOR = '\n\n'


class TargetLanguage(str, Enum):
    TURKISH = 'tr'
    ENGLISH = 'en'

    @classmethod
    def parse(cls, value, default=None):
        """Coerce a language code or member; unknown codes return ``default``."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return default


# Language the fast provider translates from; targeting it skips translation
SOURCE_LANGUAGE = TargetLanguage.ENGLISH


class Sentiment(str, Enum):
    POSITIVE = 'positive'
    NEGATIVE = 'negative'
    NEUTRAL = 'neutral'

    @classmethod
    def coerce(cls, value):
        """Map provider output onto the enum; anything unrecognised is neutral."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        return cls.NEUTRAL


def build_content(title, body=None):
    """Join title and body and cap the result at MAX_CONTENT_LENGTH characters.

    Content of exactly MAX_CONTENT_LENGTH characters is kept as-is; longer
    content is cut and gets TRUNCATION_MARKER appended.
    """
    title = title or ''
    content = f"{title}{CONTENT_SEPARATOR}{body}" if body else title
    if len(content) > MAX_CONTENT_LENGTH:
        content = content[:MAX_CONTENT_LENGTH] + TRUNCATION_MARKER
    return content


@dataclass(frozen=True)
class EnrichmentRequest:
    title: str
    body: Optional[str] = None
    target_language: TargetLanguage = TargetLanguage.TURKISH


@dataclass(frozen=True)
class SummaryResult:
    summary: str
    sentiment: Sentiment = Sentiment.NEUTRAL

    def to_dict(self) -> dict:
        return {"summary": self.summary, "sentiment": self.sentiment.value}


@dataclass(frozen=True)
class LanguageProfile:
    """Everything that differs between the summarization variants.

    Attributes:
        language: Output language of the summary
        system_prompt: Instruction sent with every summarization request
        enforce_leakage_scrub: Remove English sentence fragments from the summary
        distinctive_chars: Regex of characters that only occur in the target
            language; used to accept a translated title in the last fallback
    """
    language: TargetLanguage
    system_prompt: str
    enforce_leakage_scrub: bool = False
    distinctive_chars: Optional[str] = None
