"""
Custom exception hierarchy for the trading simulator.

Every failure a caller can recover from (unknown account, unknown
symbol, not enough cash or shares) has its own exception type so the
engine can report it as a distinguishable result.
"""

from typing import Optional, Dict, Any


class TradingException(Exception):
    """Base exception for all trading-related errors."""

    default_code: Optional[str] = None

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.context = context or {}

    def __str__(self) -> str:
        base = self.message
        if self.code:
            base += f" (Code: {self.code})"
        if self.context:
            base += f" Context: {self.context}"
        return base


class NotFoundException(TradingException):
    """Raised when a username or symbol cannot be resolved."""
    default_code = "NOT_FOUND"


class AccountNotFoundException(NotFoundException):
    """Raised when no account is registered under a username."""
    default_code = "NOT_FOUND"


class InstrumentNotFoundException(NotFoundException):
    """Raised when a symbol is not in the instrument registry."""
    default_code = "INSTRUMENT_NOT_FOUND"


class AlreadyExistsException(TradingException):
    """Raised on duplicate registration of a username or symbol."""
    default_code = "ALREADY_EXISTS"


class InsufficientFundsException(TradingException):
    """Raised when there are insufficient funds for an operation."""
    default_code = "INSUFFICIENT_FUNDS"


class InsufficientSharesException(TradingException):
    """Raised when a sell asks for more shares than are held."""
    default_code = "INSUFFICIENT_SHARES"


class NoSuchHoldingException(InsufficientSharesException):
    """Raised when a sell targets a symbol the account does not hold."""
    default_code = "NO_SUCH_HOLDING"


class NotLoggedInException(TradingException):
    """Raised when a trade is attempted without an account handle."""
    default_code = "NOT_LOGGED_IN"


class ValidationException(TradingException):
    """Raised when data validation fails."""
    default_code = "VALIDATION"


class ConfigurationException(TradingException):
    """Raised when there are configuration or setup errors."""
    default_code = "CONFIGURATION"
