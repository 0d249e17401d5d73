"""
Trading exceptions module for the trading simulator.
"""

from .trading_exceptions import (
    TradingException,
    NotFoundException,
    AccountNotFoundException,
    InstrumentNotFoundException,
    AlreadyExistsException,
    InsufficientFundsException,
    InsufficientSharesException,
    NoSuchHoldingException,
    NotLoggedInException,
    ValidationException,
    ConfigurationException
)

__all__ = [
    "TradingException",
    "NotFoundException",
    "AccountNotFoundException",
    "InstrumentNotFoundException",
    "AlreadyExistsException",
    "InsufficientFundsException",
    "InsufficientSharesException",
    "NoSuchHoldingException",
    "NotLoggedInException",
    "ValidationException",
    "ConfigurationException"
]
