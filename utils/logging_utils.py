#!/usr/bin/env python3
"""
Logging utilities for Newslingo.

This module provides logging functionality:
- Error logging with consistent formatting
- Provider error handling
- Info, success and warning logging
- Retry logging for network operations
"""
import os
import sys
import traceback
from utils.date_utils import format_datetime

def _error_log_dir():
    """Directory for error.log; an empty LOG_DIR disables the file."""
    return os.getenv('LOG_DIR', 'logs')

def log_error(module_name, error_message, exception=None):
    """Log an error with consistent formatting.

    Used across all modules for standardized error logging.

    Args:
        module_name (str): Name of the module where the error occurred
        error_message (str): Human-readable error message
        exception (Exception, optional): Exception object if available
    """
    timestamp = format_datetime()

    # Format the error message
    formatted_message = f"[ERROR] {timestamp} - {module_name}: {error_message}"

    # Print to console
    print(formatted_message, file=sys.stderr)

    # If there's an exception, print the traceback
    if exception:
        print(f"Exception details: {str(exception)}", file=sys.stderr)
        print("Traceback:", file=sys.stderr)
        traceback.print_exception(type(exception), exception, exception.__traceback__, file=sys.stderr)

    log_dir = _error_log_dir()
    if not log_dir:
        return

    os.makedirs(log_dir, exist_ok=True)

    # Append to error log file
    with open(os.path.join(log_dir, 'error.log'), 'a', encoding='utf-8') as log_file:
        log_file.write(f"{formatted_message}\n")
        if exception:
            log_file.write(f"Exception details: {str(exception)}\n")
            log_file.write("Traceback:\n")
            traceback_text = ''.join(traceback.format_exception(type(exception), exception, exception.__traceback__))
            log_file.write(f"{traceback_text}\n")
        log_file.write("---\n")

def log_retry(module_name, message, attempt, max_attempts, exception=None):
    """Log a retry attempt with less alarming formatting.

    Used for provider calls that are expected to occasionally fail and retry.

    Args:
        module_name (str): Name of the module logging the retry
        message (str): Human-readable description of what's being retried
        attempt (int): Current attempt number
        max_attempts (int): Maximum number of attempts
        exception (Exception, optional): Exception that caused the retry
    """
    timestamp = format_datetime()
    formatted_message = f"[RETRY] {timestamp} - {module_name}: {message} (attempt {attempt}/{max_attempts})"

    print(formatted_message)

    # Timeouts and connection drops carry no useful message
    if exception and not (exception.__class__.__name__ == 'TimeoutError' or isinstance(exception, ConnectionError)):
        print(f"Reason: {str(exception)}")

def log_info(module_name, message):
    """Log an informational message with consistent formatting.

    Args:
        module_name (str): Name of the module logging the message
        message (str): The informational message
    """
    timestamp = format_datetime()
    formatted_message = f"[INFO] {timestamp} - {module_name}: {message}"
    print(formatted_message)

def log_success(module_name, message):
    """Log a success message with consistent formatting.

    Args:
        module_name (str): Name of the module logging the message
        message (str): The success message
    """
    timestamp = format_datetime()
    formatted_message = f"[SUCCESS] {timestamp} - {module_name}: {message}"
    print(formatted_message)

def log_warning(module_name, message):
    """Log a warning message with consistent formatting.

    Used for degraded results and provider failures that have a fallback.

    Args:
        module_name (str): Name of the module logging the message
        message (str): The warning message
    """
    timestamp = format_datetime()
    formatted_message = f"[WARNING] {timestamp} - {module_name}: {message}"
    print(formatted_message, file=sys.stderr)

def handle_request_error(module_name, response, error_message):
    """Describe a failed HTTP response consistently.

    Used in: enricher/providers.py

    Args:
        module_name (str): Name of the module where the error occurred
        response: httpx.Response object from the request
        error_message (str): Base error message

    Returns:
        str: The full message, including status code and response body
    """
    full_message = f"{error_message} Status code: {response.status_code}"

    try:
        response_text = response.text
        if response_text:
            full_message += f"\nResponse: {response_text[:500]}"
    except Exception:
        pass

    log_warning(module_name, full_message)
    return full_message
