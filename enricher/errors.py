#!/usr/bin/env python3
"""
Provider error taxonomy for Newslingo.

Every error here is recoverable inside the pipeline: orchestrators catch them
and move to the next fallback tier.
"""


class ProviderError(Exception):
    """Base class for failures of a translation or completion provider."""


class NetworkFailure(ProviderError):
    """Non-success HTTP response or transport error."""


class EmptyOutput(ProviderError):
    """Provider returned blank or absent content."""


class ValidationFailure(ProviderError):
    """Output failed a quality check (too short, identical to the input)."""


class ParseFailure(ProviderError):
    """Structured response was not valid JSON after cleanup."""
