"""
Core trading simulator components.
"""

from .instrument_registry import InstrumentRegistry
from .account_ledger import AccountLedger
from .transaction_log import TransactionLog
from .trading_engine import TradingEngine
from .market_simulator import MarketSimulator

__all__ = [
    'InstrumentRegistry',
    'AccountLedger',
    'TransactionLog',
    'TradingEngine',
    'MarketSimulator'
]
