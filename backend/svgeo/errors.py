"""Typed errors raised by the converters."""

from __future__ import annotations


class SvgeoError(Exception):
    """Base error for the project."""


class InputError(SvgeoError, ValueError):
    """Input cannot be converted (empty text, no <svg>, no <path>, invalid JSON)."""


class SanitizeError(SvgeoError, ValueError):
    """Markup sanitizer rejected the input. Recovered by the forward converter."""
