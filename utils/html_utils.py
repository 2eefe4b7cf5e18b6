#!/usr/bin/env python3
"""
HTML utilities for Newslingo.

This module provides HTML processing utilities:
- HTML tag stripping (BeautifulSoup and regex-only)
- Text normalization
"""
import re

from bs4 import BeautifulSoup

TAG_PATTERN = re.compile(r'<[^>]*>')

# Elements whose boundaries separate words; inline tags join their text directly
BLOCK_TAGS = [
    'p', 'div', 'li', 'ul', 'ol', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
    'blockquote', 'pre', 'table', 'tr', 'td', 'th', 'section', 'article',
    'header', 'footer', 'body', 'title',
]

def strip_html(html):
    """Remove HTML tags from a string using BeautifulSoup.

    Script and style elements are dropped together with their content.
    Block elements and <br> become line breaks; inline elements leave no gap.

    Used in: enricher/normalizer.py

    Args:
        html (str): HTML content to strip

    Returns:
        str: Plain text with HTML tags removed
    """
    if not html:
        return ""
    soup = BeautifulSoup(html, 'html.parser')

    for tag in soup.find_all(['script', 'style']):
        tag.decompose()

    for br in soup.find_all('br'):
        br.replace_with('\n')

    for block in soup.find_all(BLOCK_TAGS):
        block.insert_before(soup.new_string('\n'))
        block.append(soup.new_string('\n'))

    return soup.get_text()

def strip_tags(text):
    """Remove anything that looks like a tag with a regex.

    Used as the fallback when structured parsing fails, and to drop tags that
    only appear after entity decoding.

    Args:
        text (str): Text possibly containing markup

    Returns:
        str: Text with tag-like fragments replaced by spaces
    """
    if not text:
        return ""
    return TAG_PATTERN.sub(' ', text)

def clean_text(text):
    """Clean text by collapsing whitespace and blank lines.

    Args:
        text (str): Text to clean

    Returns:
        str: Cleaned text with normalized whitespace
    """
    text = re.sub(r'\s+', ' ', text)
    text = re.sub(r'\n\s*\n', '\n', text)
    return text.strip()
