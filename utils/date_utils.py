#!/usr/bin/env python3
"""
Date and time utilities for Newslingo.

This module provides the timestamps used by log lines:
- Timezone configuration
- Log timestamp formatting
"""
from datetime import datetime

import pytz

DATETIME_FORMAT = '%Y-%m-%d %H:%M:%S'
DATETIME_TZ_FORMAT = '%Y-%m-%d %H:%M:%S %Z'

# Timezone object, replaced by env_utils during initialization
TIMEZONE = pytz.UTC

def set_timezone(timezone_str):
    """Set the global timezone object.

    Unknown timezone names leave UTC in place.
    """
    global TIMEZONE
    if not timezone_str:
        TIMEZONE = pytz.UTC
        return
    try:
        TIMEZONE = pytz.timezone(timezone_str)
    except pytz.UnknownTimeZoneError:
        TIMEZONE = pytz.UTC

def get_now():
    """Get current datetime with timezone information.

    Returns:
        datetime: Current time as timezone-aware datetime
    """
    return datetime.now(TIMEZONE)

def format_datetime(dt=None, include_timezone=True):
    """Format a datetime with consistent timezone handling.

    Args:
        dt (datetime, optional): Datetime object to format. If None, uses current time.
        include_timezone (bool): Whether to include timezone in the formatted string.

    Returns:
        str: Formatted datetime string
    """
    if dt is None:
        dt = get_now()
    elif dt.tzinfo is None:
        # Add timezone if it's naive
        dt = TIMEZONE.localize(dt)

    if include_timezone:
        return dt.strftime(DATETIME_TZ_FORMAT)
    else:
        return dt.strftime(DATETIME_FORMAT)
