"""
Account ledger module.
"""

from decimal import Decimal
from typing import Any, Dict, List
from loguru import logger

from trading_sim.trading_types import Account, Number, to_decimal
from trading_sim.core.instrument_registry import InstrumentRegistry
from trading_sim.exceptions import (
    AccountNotFoundException,
    AlreadyExistsException,
    InstrumentNotFoundException,
    ValidationException
)


class AccountLedger:
    """Owns user accounts and enforces cash and share sufficiency."""

    def __init__(self):
        self._accounts: Dict[str, Account] = {}

    def register(self, username: str, initial_balance: Number) -> Account:
        """Open a new account with a starting cash balance."""
        if username in self._accounts:
            raise AlreadyExistsException(
                f"Username already exists: {username}",
                context={'username': username}
            )

        balance = to_decimal(initial_balance)
        if not balance.is_finite():
            raise ValidationException(
                f"Initial balance must be a finite amount: {balance}",
                context={'username': username, 'balance': str(balance)}
            )
        if balance < 0:
            raise ValidationException(
                f"Initial balance must not be negative: {balance}",
                context={'username': username, 'balance': str(balance)}
            )

        account = Account(username=username, balance=balance)
        self._accounts[username] = account
        logger.info(f"Registered account {username} with balance ${balance:,.2f}")
        return account

    def lookup(self, username: str) -> Account:
        account = self._accounts.get(username)
        if account is None:
            raise AccountNotFoundException(
                f"User not found: {username}",
                context={'username': username}
            )
        return account

    def accounts(self) -> List[Account]:
        return list(self._accounts.values())

    def buy(self, account: Account, symbol: str, quantity: int, price: Number) -> bool:
        """Debit cost and credit shares. Returns False without mutating on short cash."""
        cost = to_decimal(price) * quantity
        if account.balance < cost:
            logger.debug(
                f"Buy refused for {account.username}: cost ${cost:,.2f} "
                f"exceeds balance ${account.balance:,.2f}"
            )
            return False

        symbol = symbol.upper()
        new_shares = account.holdings.get(symbol, 0) + quantity
        account.balance -= cost
        account.holdings[symbol] = new_shares
        return True

    def sell(self, account: Account, symbol: str, quantity: int, price: Number) -> bool:
        """Credit proceeds and debit shares. Returns False without mutating on short shares."""
        symbol = symbol.upper()
        current_shares = account.holdings.get(symbol, 0)
        if current_shares < quantity:
            logger.debug(
                f"Sell refused for {account.username}: {quantity} {symbol} requested, "
                f"{current_shares} held"
            )
            return False

        proceeds = to_decimal(price) * quantity
        remaining = current_shares - quantity
        account.balance += proceeds
        if remaining == 0:
            del account.holdings[symbol]
        else:
            account.holdings[symbol] = remaining
        return True

    def portfolio_value(self, account: Account, registry: InstrumentRegistry) -> Decimal:
        """Cash plus holdings marked at current prices."""
        total = account.balance
        for symbol, shares in account.holdings.items():
            try:
                total += registry.get_price(symbol) * shares
            except InstrumentNotFoundException:
                # Delisted symbols contribute nothing
                continue
        return total

    def get_portfolio_metrics(self, account: Account, registry: InstrumentRegistry) -> Dict[str, Any]:
        """Get a breakdown of cash, positions and total value."""
        positions = []
        holdings_value = Decimal("0")

        for symbol in sorted(account.holdings):
            shares = account.holdings[symbol]
            if symbol not in registry:
                logger.warning(f"Held symbol {symbol} missing from registry - skipped")
                continue
            price = registry.get_price(symbol)
            value = price * shares
            holdings_value += value
            positions.append({
                'symbol': symbol,
                'shares': shares,
                'price': price,
                'value': value
            })

        return {
            'username': account.username,
            'cash': account.balance,
            'holdings_value': holdings_value,
            'total_value': account.balance + holdings_value,
            'positions': positions
        }

    def log_portfolio_state(self, account: Account, registry: InstrumentRegistry) -> None:
        """Log a one-line portfolio summary."""
        metrics = self.get_portfolio_metrics(account, registry)

        if not metrics['positions']:
            logger.info(f"Portfolio {account.username}: cash ${metrics['cash']:,.2f}, no positions")
            return

        held = ", ".join(f"{p['symbol']}x{p['shares']}" for p in metrics['positions'])
        logger.info(
            f"Portfolio {account.username}: cash ${metrics['cash']:,.2f} | {held} | "
            f"total ${metrics['total_value']:,.2f}"
        )

    def __contains__(self, username: object) -> bool:
        return username in self._accounts

    def __len__(self) -> int:
        return len(self._accounts)
