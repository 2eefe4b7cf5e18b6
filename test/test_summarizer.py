"""Tests for the summarization orchestrator."""
import json

import pytest

from enricher.errors import NetworkFailure
from enricher.models import LanguageProfile, Sentiment, SummaryResult, TargetLanguage
from enricher.summarizer import Summarizer, english_profile, turkish_profile
from enricher.translator import Translator
from utils.retry_utils import RetryPolicy

from conftest import ScriptedProvider

SUMMARY_POLICY = RetryPolicy(max_attempts=3, initial_delay=1.0)
TITLE_POLICY = RetryPolicy(max_attempts=2, initial_delay=0.5)


class StubTranslator:
    """Translator stand-in returning a fixed translation."""

    def __init__(self, result):
        self.result = result
        self.calls = []

    async def translate(self, text, target_language):
        self.calls.append((text, target_language))
        return self.result


def make_summarizer(model, translator=None, profile=None, *, sleep):
    return Summarizer(
        profile or turkish_profile(),
        model,
        translator or StubTranslator("çeviri yok"),
        policy=SUMMARY_POLICY,
        title_policy=TITLE_POLICY,
        sleep=sleep,
    )


def model_json(summary, sentiment):
    return json.dumps({"summary": summary, "sentiment": sentiment}, ensure_ascii=False)


@pytest.mark.asyncio
async def test_parsed_json_summary_and_sentiment(recording_sleep):
    model = ScriptedProvider(model_json("Ether bir günde yüzde 10 yükseldi.", "positive"))

    result = await make_summarizer(model, sleep=recording_sleep).summarize("ETH surges", "Ether rose 10% in a day")

    assert result == SummaryResult("Ether bir günde yüzde 10 yükseldi.", Sentiment.POSITIVE)
    system_prompt, content = model.complete_calls[0]
    assert "JSON" in system_prompt
    assert content == "ETH surges\n\nEther rose 10% in a day"


@pytest.mark.asyncio
async def test_short_summary_falls_back_to_title_but_keeps_sentiment(recording_sleep):
    model = ScriptedProvider('{"summary": "ok", "sentiment": "positive"}')

    result = await make_summarizer(model, sleep=recording_sleep).summarize("ETH surges")

    assert result == SummaryResult("ETH surges", Sentiment.POSITIVE)


@pytest.mark.asyncio
async def test_code_fenced_json_is_parsed(recording_sleep):
    raw = "```json\n" + model_json("Bitcoin madencileri rekor gelir elde etti.", "negative") + "\n```"
    model = ScriptedProvider(raw)

    result = await make_summarizer(model, sleep=recording_sleep).summarize("Miners post record revenue")

    assert result == SummaryResult("Bitcoin madencileri rekor gelir elde etti.", Sentiment.NEGATIVE)


@pytest.mark.asyncio
@pytest.mark.parametrize("sentiment", ["Positive!", None, 3, "bullish"])
async def test_unknown_sentiment_becomes_neutral(sentiment, recording_sleep):
    model = ScriptedProvider(model_json("Solana ağı yeniden çalışıyor.", sentiment))

    result = await make_summarizer(model, sleep=recording_sleep).summarize("Solana is back")

    assert result.sentiment is Sentiment.NEUTRAL


@pytest.mark.asyncio
async def test_missing_sentiment_becomes_neutral(recording_sleep):
    model = ScriptedProvider('{"summary": "Solana ağı yeniden çalışıyor."}')

    result = await make_summarizer(model, sleep=recording_sleep).summarize("Solana is back")

    assert result == SummaryResult("Solana ağı yeniden çalışıyor.", Sentiment.NEUTRAL)


@pytest.mark.asyncio
async def test_non_json_output_is_used_verbatim(recording_sleep):
    model = ScriptedProvider("Ethereum ağında işlem ücretleri düştü")

    result = await make_summarizer(model, sleep=recording_sleep).summarize("ETH fees drop")

    assert result == SummaryResult("Ethereum ağında işlem ücretleri düştü", Sentiment.NEUTRAL)


@pytest.mark.asyncio
async def test_short_non_json_output_goes_to_title_translation(recording_sleep):
    model = ScriptedProvider("Hata")
    translator = StubTranslator("ETH ücretleri düştü")

    result = await make_summarizer(model, translator, sleep=recording_sleep).summarize("ETH fees drop")

    assert result == SummaryResult("ETH ücretleri düştü", Sentiment.NEUTRAL)
    assert translator.calls == [("ETH fees drop", TargetLanguage.TURKISH)]


@pytest.mark.asyncio
async def test_non_object_json_uses_title(recording_sleep):
    model = ScriptedProvider('"just a string"')

    result = await make_summarizer(model, sleep=recording_sleep).summarize("Polygon rebrands token")

    assert result == SummaryResult("Polygon rebrands token", Sentiment.NEUTRAL)


@pytest.mark.asyncio
async def test_turkish_summary_is_scrubbed_of_english_sentences(recording_sleep):
    summary = "Bitcoin 50 bin doları aştı. The price rose sharply after the ETF news."
    model = ScriptedProvider(model_json(summary, "positive"))

    result = await make_summarizer(model, sleep=recording_sleep).summarize("Bitcoin tops $50k")

    assert result.summary == "Bitcoin 50 bin doları aştı."


@pytest.mark.asyncio
async def test_english_summary_is_not_scrubbed(recording_sleep):
    summary = "Bitcoin topped $50k. The price rose sharply after the ETF news."
    model = ScriptedProvider(model_json(summary, "positive"))

    result = await make_summarizer(model, profile=english_profile(), sleep=recording_sleep).summarize("Bitcoin tops $50k")

    assert result == SummaryResult(summary, Sentiment.POSITIVE)


@pytest.mark.asyncio
async def test_provider_failures_are_retried_three_times(recording_sleep):
    model = ScriptedProvider(
        NetworkFailure("503"),
        NetworkFailure("503"),
        model_json("Cardano akıllı sözleşmeleri başlattı.", "positive"),
    )

    result = await make_summarizer(model, sleep=recording_sleep).summarize("Cardano launches smart contracts")

    assert result.summary == "Cardano akıllı sözleşmeleri başlattı."
    assert recording_sleep.delays == [1.0, 2.0]


@pytest.mark.asyncio
async def test_exhausted_retries_fall_back_to_title_translation(recording_sleep):
    model = ScriptedProvider(NetworkFailure("1"), NetworkFailure("2"), NetworkFailure("3"))
    translator = StubTranslator("Cardano akıllı sözleşmeleri başlattı")

    result = await make_summarizer(model, translator, sleep=recording_sleep).summarize("Cardano launches smart contracts")

    assert result == SummaryResult("Cardano akıllı sözleşmeleri başlattı", Sentiment.NEUTRAL)
    assert len(model.complete_calls) == 3
    assert recording_sleep.delays == [1.0, 2.0]


@pytest.mark.asyncio
async def test_unverifiable_title_translation_returns_title(recording_sleep):
    model = ScriptedProvider(NetworkFailure("1"), NetworkFailure("2"), NetworkFailure("3"))
    translator = StubTranslator("eth up")

    result = await make_summarizer(model, translator, sleep=recording_sleep).summarize("ETH UP")

    assert result == SummaryResult("ETH UP", Sentiment.NEUTRAL)


@pytest.mark.asyncio
async def test_short_title_translation_with_turkish_characters_is_accepted(recording_sleep):
    model = ScriptedProvider(NetworkFailure("1"), NetworkFailure("2"), NetworkFailure("3"))
    translator = StubTranslator("düşüş")

    result = await make_summarizer(model, translator, sleep=recording_sleep).summarize("Düşüş")

    assert result == SummaryResult("düşüş", Sentiment.NEUTRAL)


@pytest.mark.asyncio
async def test_failing_title_translation_is_retried_then_title_returned(recording_sleep):
    class BrokenTranslator:
        calls = 0

        async def translate(self, text, target_language):
            BrokenTranslator.calls += 1
            raise RuntimeError("translator down")

    model = ScriptedProvider(NetworkFailure("1"), NetworkFailure("2"), NetworkFailure("3"))

    result = await make_summarizer(model, BrokenTranslator(), sleep=recording_sleep).summarize("Polygon rebrands token")

    assert result == SummaryResult("Polygon rebrands token", Sentiment.NEUTRAL)
    assert BrokenTranslator.calls == 2
    assert recording_sleep.delays == [1.0, 2.0, 0.5]


@pytest.mark.asyncio
async def test_title_fallback_uses_real_translator_chain(recording_sleep):
    model = ScriptedProvider(NetworkFailure("1"), NetworkFailure("2"), NetworkFailure("3"))
    fast = ScriptedProvider("Tether yeni token bastı")
    translator = Translator(fast, ScriptedProvider(), fast_policy=RetryPolicy(max_attempts=1, initial_delay=0),
                            fallback_policy=RetryPolicy(max_attempts=1, initial_delay=0), sleep=recording_sleep)

    result = await make_summarizer(model, translator, sleep=recording_sleep).summarize("Tether mints new supply")

    assert result == SummaryResult("Tether yeni token bastı", Sentiment.NEUTRAL)


@pytest.mark.asyncio
@pytest.mark.parametrize("title,body", [("", None), ("   ", None), (None, None)])
async def test_blank_content_short_circuits(title, body, recording_sleep):
    model = ScriptedProvider()

    result = await make_summarizer(model, sleep=recording_sleep).summarize(title, body)

    assert result.sentiment is Sentiment.NEUTRAL
    assert result.summary == (title or "")
    assert model.complete_calls == []


@pytest.mark.asyncio
async def test_long_content_is_truncated_before_sending(recording_sleep):
    model = ScriptedProvider(model_json("Uzun haber kısa özetlendi.", "neutral"))

    await make_summarizer(model, sleep=recording_sleep).summarize("Long read", "x" * 5000)

    _, content = model.complete_calls[0]
    assert len(content) == 2003
    assert content.endswith("...")


@pytest.mark.asyncio
async def test_unexpected_error_returns_title(recording_sleep):
    class Exploding:
        async def complete(self, *args, **kwargs):
            raise RuntimeError("bug")

    class ExplodingTranslator:
        async def translate(self, text, target_language):
            raise RuntimeError("bug")

    summarizer = make_summarizer(Exploding(), ExplodingTranslator(), sleep=recording_sleep)

    assert await summarizer.summarize("ETH surges", "x" * 3000) == SummaryResult("ETH surges", Sentiment.NEUTRAL)


def test_profiles_differ_only_in_language_rules():
    turkish = turkish_profile()
    english = english_profile()

    assert isinstance(turkish, LanguageProfile)
    assert turkish.language is TargetLanguage.TURKISH and turkish.enforce_leakage_scrub
    assert english.language is TargetLanguage.ENGLISH and not english.enforce_leakage_scrub
    assert english.distinctive_chars is None
    assert "Türkçe" in turkish.system_prompt
    assert "English" in english.system_prompt
