"""
Newslingo - A resilient enrichment pipeline for crypto news: cleans raw (HTML) text,
translates it to Turkish via LibreTranslate with a chat-model fallback, and produces
short summaries with sentiment in Turkish or English.
"""

__version__ = '1.0.0'

from enricher.errors import EmptyOutput, NetworkFailure, ParseFailure, ProviderError, ValidationFailure
from enricher.models import EnrichmentRequest, LanguageProfile, Sentiment, SummaryResult, TargetLanguage
from enricher.normalizer import normalize
from enricher.summarizer import Summarizer, enrich, summarize_and_translate, summarize_in_english
from enricher.translator import Translator, translate, translate_batch, translate_text, translate_to_turkish

# Define package exports - only include names that should be part of the public API
__all__ = [
    # Pipeline entry points
    'normalize',
    'translate',
    'translate_text',
    'translate_to_turkish',
    'translate_batch',
    'summarize_and_translate',
    'summarize_in_english',
    'enrich',

    # Orchestrators
    'Translator',
    'Summarizer',

    # Value types
    'EnrichmentRequest',
    'LanguageProfile',
    'Sentiment',
    'SummaryResult',
    'TargetLanguage',

    # Provider errors
    'ProviderError',
    'NetworkFailure',
    'EmptyOutput',
    'ValidationFailure',
    'ParseFailure',
]
