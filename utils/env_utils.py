#!/usr/bin/env python3
"""
Environment utilities for Newslingo.

This module provides environment variable management:
- Loading environment variables from .env
- Applying defaults and type conversion
- Validating required variables
"""
import os
import sys
from dotenv import load_dotenv
from utils.date_utils import set_timezone

# Variables without which the pipeline can only degrade
REQUIRED_VARS = [
    'OPENAI_API_KEY',
]

# Known variables and their defaults
DEFAULTS = {
    'OPENAI_API_KEY': '',
    'MODEL_API_URL': 'https://api.openai.com/v1/chat/completions',
    'MODEL_NAME': 'gpt-4o-mini',
    'MODEL_TEMPERATURE': '0.3',
    'MODEL_MAX_TOKENS': '500',
    'MODEL_TIMEOUT': '60',
    'LIBRETRANSLATE_PROTOCOL': 'https',
    'LIBRETRANSLATE_ORIGIN': 'libretranslate.com',
    'LIBRETRANSLATE_PATH': '/translate',
    'LIBRETRANSLATE_API_KEY': '',
    'TRANSLATE_PROXY_URL': '',
    'NETWORK_TIMEOUT': '30',
    'SUMMARIZER_PROMPT_PATH_TR': '',
    'SUMMARIZER_PROMPT_PATH_EN': '',
    'TRANSLATOR_PROMPT_PATH': '',
    'TIMEZONE': 'UTC',
    'LOG_DIR': 'logs',
    'FAST_TRANSLATE_MAX_ATTEMPTS': '1',
    'FAST_TRANSLATE_DELAY': '0',
    'MODEL_TRANSLATE_MAX_ATTEMPTS': '2',
    'MODEL_TRANSLATE_DELAY': '1.0',
    'SUMMARY_MAX_ATTEMPTS': '3',
    'SUMMARY_DELAY': '1.0',
    'TITLE_MAX_ATTEMPTS': '2',
    'TITLE_DELAY': '0.5',
}

INT_VARS = [
    'MODEL_MAX_TOKENS',
    'FAST_TRANSLATE_MAX_ATTEMPTS',
    'MODEL_TRANSLATE_MAX_ATTEMPTS',
    'SUMMARY_MAX_ATTEMPTS',
    'TITLE_MAX_ATTEMPTS',
]

FLOAT_VARS = [
    'MODEL_TEMPERATURE',
    'MODEL_TIMEOUT',
    'NETWORK_TIMEOUT',
    'FAST_TRANSLATE_DELAY',
    'MODEL_TRANSLATE_DELAY',
    'SUMMARY_DELAY',
    'TITLE_DELAY',
]

# Storage for loaded environment variables
env_vars = {}

def _strip_inline_comment(value):
    # "# " marks a comment; a bare '#' may be part of a key or URL fragment
    if value and ' #' in value:
        value = value.split(' #')[0]
    return value.strip() if value is not None else value

def _convert(var, value, converter):
    if value == '':
        return converter(DEFAULTS[var])
    try:
        return converter(value)
    except (TypeError, ValueError):
        print(f"Warning: Invalid value for {var}: {value!r}, using default {DEFAULTS[var]}")
        return converter(DEFAULTS[var])

def load_environment():
    """Load environment variables from .env file and apply defaults."""
    load_dotenv()

    for var, default in DEFAULTS.items():
        value = _strip_inline_comment(os.getenv(var))
        env_vars[var] = default if value is None else value

    for var in INT_VARS:
        env_vars[var] = _convert(var, env_vars[var], int)
    for var in FLOAT_VARS:
        env_vars[var] = _convert(var, env_vars[var], float)

    # Normalize the proxy URL (no trailing slash)
    env_vars['TRANSLATE_PROXY_URL'] = env_vars['TRANSLATE_PROXY_URL'].rstrip('/')

    set_timezone(env_vars['TIMEZONE'])

    return env_vars

def validate_config():
    """Validate that all required environment variables are set.

    Exits the process when any are missing; only the CLI calls this.
    """
    missing_vars = [var for var in REQUIRED_VARS if not os.getenv(var)]

    if missing_vars:
        print(f"Error: Missing required environment variables: {', '.join(missing_vars)}")
        print("Please create a .env file based on .env.example")
        sys.exit(1)

def get_env(var_name, default=None):
    """Get an environment variable value.

    Args:
        var_name (str): Name of the environment variable
        default: Default value if not found

    Returns:
        The environment variable value or default
    """
    return env_vars.get(var_name, default)

# Initialize environment variables on module import
load_environment()
