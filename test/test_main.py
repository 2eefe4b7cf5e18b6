"""Tests for the command-line entry point."""
import json

import pytest

import main
from enricher import summarizer, translator
from enricher.models import Sentiment, SummaryResult, TargetLanguage


def test_parse_arguments_defaults_to_turkish():
    args = main.parse_arguments(['translate', 'Bitcoin hits $50k'])

    assert args.command == 'translate'
    assert args.text == 'Bitcoin hits $50k'
    assert args.lang == 'tr'
    assert args.json is False


def test_parse_arguments_rejects_unknown_language():
    with pytest.raises(SystemExit):
        main.parse_arguments(['translate', 'text', '--lang', 'de'])


@pytest.mark.asyncio
async def test_translate_command(monkeypatch):
    calls = []

    async def fake_translate(text, target_language):
        calls.append((text, target_language))
        return "Bitcoin 50 bin dolara ulaştı"

    monkeypatch.setattr(translator, 'translate', fake_translate)

    output = await main.run_command(main.parse_arguments(['translate', 'Bitcoin hits $50k', '--json']))

    assert json.loads(output) == {"text": "Bitcoin 50 bin dolara ulaştı"}
    assert calls == [('Bitcoin hits $50k', TargetLanguage.TURKISH)]


@pytest.mark.asyncio
async def test_summarize_command_picks_language_variant(monkeypatch):
    async def fake_english(title, body=None):
        return SummaryResult(f"{title}: {body}", Sentiment.NEGATIVE)

    async def fake_turkish(title, body=None):
        raise AssertionError("Turkish variant must not be used")

    monkeypatch.setattr(summarizer, 'summarize_in_english', fake_english)
    monkeypatch.setattr(summarizer, 'summarize_and_translate', fake_turkish)

    args = main.parse_arguments(['summarize', 'Exchange hacked', '--body', 'Funds drained', '--lang', 'en'])
    output = await main.run_command(args)

    assert output == "[negative] Exchange hacked: Funds drained"


@pytest.mark.asyncio
async def test_batch_command_reads_one_text_per_line(tmp_path, monkeypatch):
    source = tmp_path / 'headlines.txt'
    source.write_text("first headline\n\nsecond headline\n", encoding='utf-8')

    async def fake_batch(texts, target_language):
        return [text.upper() for text in texts]

    monkeypatch.setattr(translator, 'translate_batch', fake_batch)

    output = await main.run_command(main.parse_arguments(['batch', str(source), '--json']))

    assert json.loads(output) == ["FIRST HEADLINE", "SECOND HEADLINE"]


def test_check_config_logs_success(monkeypatch, capsys):
    monkeypatch.setenv('OPENAI_API_KEY', 'sk-test')

    main.check_config()

    assert "[SUCCESS]" in capsys.readouterr().out


def test_check_config_exits_without_api_key(monkeypatch):
    monkeypatch.delenv('OPENAI_API_KEY', raising=False)

    with pytest.raises(SystemExit) as excinfo:
        main.check_config()
    assert excinfo.value.code == 1
