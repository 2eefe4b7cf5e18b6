#!/usr/bin/env python3
"""
Module for turning raw, possibly HTML-contaminated news text into clean plain text.
"""
import html
import re

from utils.html_utils import clean_text, strip_html, strip_tags
from utils.logging_utils import log_warning

# Results shorter than this carry nothing usable
MIN_TEXT_LENGTH = 10

# Mixed-content feeds append source/category metadata after a pipe
PIPE = '|'

LINK_SHORTENERS = ('t.co', 'bit.ly', 'goo.gl', 'tinyurl.com', 'ow.ly', 'buff.ly', 'dlvr.it', 'lnkd.in')

NOISE_PATTERNS = [
    # Links
    re.compile(r'https?://[^\s]+'),
    re.compile(r'www\.[^\s]+'),
    re.compile(r'\b(?:' + '|'.join(re.escape(domain) for domain in LINK_SHORTENERS) + r')/[^\s]+', re.IGNORECASE),
    # Tracking parameters and source annotations
    re.compile(r'source=(?:twitter|web|facebook|instagram|reddit|telegram)[^\s]*', re.IGNORECASE),
    re.compile(r'utm_[a-z_]+=[^\s&]*', re.IGNORECASE),
    re.compile(r'\bref=[^\s&]*', re.IGNORECASE),
    re.compile(r'\?[a-z_]+=\w+(?:&[a-z_]+=\w+)*', re.IGNORECASE),
    # Feed artifacts
    re.compile(r'RSVP:', re.IGNORECASE),
    re.compile(r'Read more:', re.IGNORECASE),
    re.compile(r'Click here:', re.IGNORECASE),
    re.compile(r'\[…\]'),
    re.compile(r'\[\.\.\.\]'),
]


def _decode_markup(raw):
    """Parse markup, then decode entities and drop revealed tags until stable.

    Handles entities encoded more than once, e.g. &amp;amp;.
    """
    text = strip_html(raw)
    while True:
        decoded = strip_tags(html.unescape(text))
        if decoded == text:
            return decoded
        text = decoded


def _before_pipe(text):
    """Text before the first pipe, or all of it when that segment is blank."""
    head = text.split(PIPE)[0]
    return head if head.strip() else text


def _strip_noise(text):
    """Apply NOISE_PATTERNS and collapse whitespace until nothing changes."""
    text = clean_text(text)
    while True:
        stripped = text
        for pattern in NOISE_PATTERNS:
            stripped = pattern.sub('', stripped)
        stripped = clean_text(stripped)
        if stripped == text:
            return stripped
        text = stripped


def _fallback_normalize(raw):
    """Regex-only pass used when HTML parsing fails. Never raises."""
    text = _before_pipe(strip_tags(str(raw)))
    text = re.sub(r'https?://[^\s]+', '', text)
    return clean_text(text)


def normalize(raw):
    """Strip markup and noise from raw text.

    Args:
        raw (str): Raw title or body, possibly HTML

    Returns:
        str: Clean plain text, or "" when fewer than MIN_TEXT_LENGTH
            characters of usable text remain
    """
    if not raw:
        return ""

    try:
        text = _before_pipe(_decode_markup(raw))
        text = _strip_noise(text)
    except Exception as e:
        log_warning('Normalizer', f"HTML parsing failed, using regex fallback: {e}")
        return _fallback_normalize(raw)

    if len(text) < MIN_TEXT_LENGTH:
        return ""

    return text
