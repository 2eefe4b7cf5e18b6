#!/usr/bin/env python3
"""
Heuristic removal of English fragments from Turkish summaries.

The model sometimes appends leftover source-language sentences to a Turkish
summary. The patterns below match sentences that start with common English
auxiliary verbs, determiners or connectives. This is pattern matching, not
language detection, so unlisted phrasings survive and a Turkish sentence that
happens to match a pattern is removed.
"""
import re

_AUXILIARIES = r'(?:is|are|was|were|has|have|will|would|could|should|can|may|might|had|been|being)'

# Whole sentences after a full stop, replaced by a single period
SENTENCE_PATTERNS = [
    re.compile(r'\. [A-Z][a-z]+ ' + _AUXILIARIES + r'[^.]*\.'),
] + [
    re.compile(r'\. ' + starter + r' [^.]*\.')
    for starter in ('The', 'This', 'It', 'According to', 'In', 'On', 'At', 'For', 'With', 'From', 'By', 'As')
] + [
    re.compile(r'\. ' + connective + r'[^.]*\.')
    for connective in ('However', 'Additionally', 'Furthermore', 'Meanwhile', 'Moreover')
]

# Unterminated English tails at the end of the summary, removed entirely
TAIL_PATTERNS = [
    re.compile(r'\s+(?:is|are|was|were|has|have|had|been|being)\s+[a-z][^.]*\Z', re.IGNORECASE),
    re.compile(r'\s+(?:the|this|that|these|those|it|he|she|they)\s+[a-z][^.]*\Z', re.IGNORECASE),
    re.compile(r'\s+[A-Z][a-z]+\s*\Z'),
]


def scrub_leakage(summary):
    """Remove English sentence fragments from a Turkish summary.

    Args:
        summary (str): Parsed model summary

    Returns:
        str: Scrubbed summary with repeated periods collapsed and whitespace trimmed
    """
    if not summary:
        return ""

    text = summary
    for pattern in SENTENCE_PATTERNS:
        text = pattern.sub('.', text)
    for pattern in TAIL_PATTERNS:
        text = pattern.sub('', text)

    text = text.strip()
    text = re.sub(r'\.+', '.', text)
    text = re.sub(r'\.\s*\Z', '.', text)
    return text
