#!/usr/bin/env python3
"""
Configuration module for the Newslingo application.
Handles loading environment variables and building per-call-site retry policies.
"""
from utils import env_utils
from utils.retry_utils import RetryPolicy

# Load environment variables explicitly after imports are complete
env_utils.load_environment()

# Get all environment variables
env_vars = env_utils.env_vars

# Model provider (OpenAI-compatible chat completions)
OPENAI_API_KEY = env_utils.get_env('OPENAI_API_KEY')
MODEL_API_URL = env_utils.get_env('MODEL_API_URL')
MODEL_NAME = env_utils.get_env('MODEL_NAME')
MODEL_TEMPERATURE = env_utils.get_env('MODEL_TEMPERATURE')
MODEL_MAX_TOKENS = env_utils.get_env('MODEL_MAX_TOKENS')
MODEL_TIMEOUT = env_utils.get_env('MODEL_TIMEOUT')

# Fast provider (LibreTranslate)
LIBRETRANSLATE_PROTOCOL = env_utils.get_env('LIBRETRANSLATE_PROTOCOL')
LIBRETRANSLATE_ORIGIN = env_utils.get_env('LIBRETRANSLATE_ORIGIN')
LIBRETRANSLATE_PATH = env_utils.get_env('LIBRETRANSLATE_PATH')
LIBRETRANSLATE_API_KEY = env_utils.get_env('LIBRETRANSLATE_API_KEY')

# Network proxy boundary; empty means direct requests
TRANSLATE_PROXY_URL = env_utils.get_env('TRANSLATE_PROXY_URL')
NETWORK_TIMEOUT = env_utils.get_env('NETWORK_TIMEOUT')

# Prompt overrides; empty paths use the built-in prompts
SUMMARIZER_PROMPT_PATH_TR = env_utils.get_env('SUMMARIZER_PROMPT_PATH_TR')
SUMMARIZER_PROMPT_PATH_EN = env_utils.get_env('SUMMARIZER_PROMPT_PATH_EN')
TRANSLATOR_PROMPT_PATH = env_utils.get_env('TRANSLATOR_PROMPT_PATH')

# Logging
TIMEZONE = env_utils.get_env('TIMEZONE')
LOG_DIR = env_utils.get_env('LOG_DIR')

# Retry policies, one per call site
FAST_TRANSLATE_RETRY = RetryPolicy(
    max_attempts=env_utils.get_env('FAST_TRANSLATE_MAX_ATTEMPTS'),
    initial_delay=env_utils.get_env('FAST_TRANSLATE_DELAY'),
)
MODEL_TRANSLATE_RETRY = RetryPolicy(
    max_attempts=env_utils.get_env('MODEL_TRANSLATE_MAX_ATTEMPTS'),
    initial_delay=env_utils.get_env('MODEL_TRANSLATE_DELAY'),
)
SUMMARY_RETRY = RetryPolicy(
    max_attempts=env_utils.get_env('SUMMARY_MAX_ATTEMPTS'),
    initial_delay=env_utils.get_env('SUMMARY_DELAY'),
)
TITLE_RETRY = RetryPolicy(
    max_attempts=env_utils.get_env('TITLE_MAX_ATTEMPTS'),
    initial_delay=env_utils.get_env('TITLE_DELAY'),
)
