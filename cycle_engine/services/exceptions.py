"""
Service-level exceptions.

Analytics functions do not raise for insufficient or odd data; these
exceptions cover malformed input at the parsing layer and caller misuse.
"""

class CycleEngineError(Exception):
    """Base exception for the cycle analytics engine."""
    pass

class InvalidDateError(CycleEngineError, ValueError):
    """Raised when a value cannot be parsed as a YYYY-MM-DD calendar date."""
    pass

class AnalyticsCacheError(CycleEngineError):
    """Raised when the analytics cache is misconfigured."""
    pass
