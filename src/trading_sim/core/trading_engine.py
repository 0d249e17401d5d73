"""
Trading engine that turns trade requests into ledger mutations and log entries.
"""

from typing import Optional
from loguru import logger

from .account_ledger import AccountLedger
from .instrument_registry import InstrumentRegistry
from .transaction_log import TransactionLog
from ..trading_types import Account, OrderSide, TradeRecord, TradeResult
from ..exceptions import (
    TradingException,
    InsufficientFundsException,
    InsufficientSharesException,
    NoSuchHoldingException,
    NotLoggedInException,
    ValidationException
)


class TradingEngine:
    """Executes buys and sells as single operations over registry, ledger and log.

    The price is read once per trade and the same value is used for the
    ledger mutation and the recorded trade. Expected failures come back as
    a failed TradeResult and leave all state untouched.
    """

    def __init__(
        self,
        registry: InstrumentRegistry,
        ledger: AccountLedger,
        transaction_log: TransactionLog
    ):
        self.registry = registry
        self.ledger = ledger
        self.transaction_log = transaction_log

    def execute_buy(self, username: Optional[str], symbol: str, quantity: int) -> TradeResult:
        """Buy shares at the current price."""
        try:
            account = self._resolve_account(username)
            self._validate_quantity(quantity)
            symbol = symbol.upper()
            price = self.registry.get_price(symbol)

            cost = price * quantity
            logger.info(
                f"Placing BUY for {account.username}: {quantity} {symbol} @ ${price:.2f} "
                f"(cost ${cost:,.2f}, balance ${account.balance:,.2f})"
            )

            if not self.ledger.buy(account, symbol, quantity, price):
                raise InsufficientFundsException(
                    "Insufficient funds!",
                    context={'cost': str(cost), 'balance': str(account.balance)}
                )

            record = self._record(account, OrderSide.BUY, symbol, quantity, price)
            logger.success(f"Purchase successful: {record}")
            return TradeResult.ok(record)

        except TradingException as e:
            logger.warning(f"Buy failed: {e.message}")
            return TradeResult.failed(e)

    def execute_sell(self, username: Optional[str], symbol: str, quantity: int) -> TradeResult:
        """Sell held shares at the current price."""
        try:
            account = self._resolve_account(username)
            self._validate_quantity(quantity)
            symbol = symbol.upper()

            held = account.shares_of(symbol)
            if held == 0:
                raise NoSuchHoldingException(
                    f"You don't own this stock: {symbol}",
                    context={'symbol': symbol}
                )
            if quantity > held:
                raise InsufficientSharesException(
                    "You don't have enough shares!",
                    context={'symbol': symbol, 'requested': quantity, 'held': held}
                )

            price = self.registry.get_price(symbol)
            logger.info(
                f"Placing SELL for {account.username}: {quantity} {symbol} @ ${price:.2f} "
                f"(proceeds ${price * quantity:,.2f})"
            )

            if not self.ledger.sell(account, symbol, quantity, price):
                raise InsufficientSharesException(
                    "You don't have enough shares!",
                    context={'symbol': symbol, 'requested': quantity, 'held': held}
                )

            record = self._record(account, OrderSide.SELL, symbol, quantity, price)
            logger.success(f"Sale successful: {record}")
            return TradeResult.ok(record)

        except TradingException as e:
            logger.warning(f"Sell failed: {e.message}")
            return TradeResult.failed(e)

    def _resolve_account(self, username: Optional[str]) -> Account:
        if not username:
            raise NotLoggedInException("Please login first!")
        return self.ledger.lookup(username)

    def _validate_quantity(self, quantity: int) -> None:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise ValidationException(
                f"Quantity must be a positive whole number: {quantity!r}",
                context={'quantity': quantity}
            )

    def _record(self, account: Account, side: OrderSide, symbol: str, quantity: int, price) -> TradeRecord:
        record = TradeRecord(
            username=account.username,
            side=side,
            symbol=symbol,
            quantity=quantity,
            price=price
        )
        self.transaction_log.append(record)
        return record
