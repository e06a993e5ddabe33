"""
Error types raised by the trend forecast.

Every failure carries a ``condition`` tag so callers can tell which
check rejected the input without parsing the message.
"""


class PriceTrendError(Exception):
    """Base class for all forecast errors."""
    condition = 'error'


class ValidationError(PriceTrendError, ValueError):
    """Malformed or out-of-range input (dates, observations)."""
    condition = 'validation'


class InsufficientDataError(PriceTrendError, ValueError):
    """Fewer observations than the fit needs."""
    condition = 'insufficient_data'


class DegenerateInputError(PriceTrendError, ValueError):
    """Independent variable has zero variance; slope is undefined."""
    condition = 'degenerate_input'


class PayloadError(ValidationError):
    """Market chart payload could not be parsed into observations."""
    condition = 'payload'


class FetchError(PriceTrendError):
    """Price series could not be downloaded."""
    condition = 'fetch'
