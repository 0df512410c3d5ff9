"""Exception types raised by ATS Checker."""


class ATSCheckerError(Exception):
    """Base class for all ATS Checker errors."""


class InputValidationError(ATSCheckerError, ValueError):
    """Raised when the resume or job description text is missing."""


class BudgetExceededError(ATSCheckerError):
    """Raised when an LLM call would exceed the configured budget."""


class LLMCallError(ATSCheckerError):
    """Raised when an LLM call fails, times out, or returns nothing usable."""
