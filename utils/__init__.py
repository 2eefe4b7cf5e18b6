"""
Utilities package for Newslingo.

This package contains utility modules used across the enrichment pipeline:
- date_utils: Timezone handling for log timestamps
- logging_utils: Console and error-file logging
- env_utils: Environment variable management
- retry_utils: Retry with exponential backoff for provider calls
- html_utils: HTML stripping and whitespace cleanup
- json_utils: Parsing JSON out of model output
- prompt_utils: Prompt loading with built-in defaults
- proxy_utils: Requests through the network proxy boundary
- completion_utils: OpenAI-compatible chat completion client
"""

from utils.date_utils import format_datetime, get_now, set_timezone
from utils.env_utils import get_env, load_environment, validate_config
from utils.html_utils import clean_text, strip_html, strip_tags
from utils.json_utils import parse_json_response, strip_code_fences
from utils.logging_utils import (
    handle_request_error, log_error, log_info,
    log_retry, log_success, log_warning
)
from utils.prompt_utils import load_prompt
from utils.proxy_utils import ProxyClient, ProxyRequest
from utils.completion_utils import ChatCompletionClient, create_completion_client, extract_content
from utils.retry_utils import RetryPolicy, retry_async


def ensure_environment_loaded():
    """Ensure environment variables are loaded. Safe to call multiple times."""
    from utils import env_utils
    if not env_utils.env_vars:
        env_utils.load_environment()
