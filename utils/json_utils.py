#!/usr/bin/env python3
"""
JSON utilities for Newslingo.

This module provides JSON handling for model output:
- Stripping markdown code fences around JSON
- Parsing JSON responses with consistent logging
"""
import json
import re

from utils.logging_utils import log_warning

CODE_FENCE_PATTERN = re.compile(r'```json\n?|```\n?')


def strip_code_fences(text: str) -> str:
    """Remove markdown code fences (```json ... ```) from model output.

    Args:
        text (str): Raw model output

    Returns:
        str: Text with all fence markers removed and whitespace trimmed
    """
    if not text:
        return ""
    return CODE_FENCE_PATTERN.sub('', text).strip()


def parse_json_response(text: str):
    """Parse model output as JSON after stripping code fences.

    Args:
        text (str): Raw model output

    Returns:
        The decoded JSON value (usually a dict)

    Raises:
        json.JSONDecodeError: If the cleaned text is not valid JSON
    """
    cleaned = strip_code_fences(text)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        log_warning('JsonUtils', f"Invalid JSON in model output: {e}")
        raise
