"""
TradingSimulator - the context object that owns one simulated market.
"""

import random
from datetime import datetime
from typing import Any, Dict, List, Optional

from loguru import logger

from trading_sim.config import SimulatorConfig
from trading_sim.core import (
    AccountLedger,
    InstrumentRegistry,
    MarketSimulator,
    TradingEngine,
    TransactionLog
)
from trading_sim.exceptions import ConfigurationException, NotLoggedInException, TradingException
from trading_sim.metrics import MetricsTracker
from trading_sim.trading_types import Account, Number, Session, TradeRecord, TradeResult


class TradingSimulator:
    """
    In-memory stock trading simulator.

    Every piece of mutable state (instrument prices, accounts and the
    transaction log) lives on an instance, so independent simulators never
    share anything. Callers identify the acting user with the Session
    returned by login().
    """

    def __init__(self, config: Optional[SimulatorConfig] = None, rng: Optional[random.Random] = None):
        """Initialize the simulator with its components."""
        self.config = config or SimulatorConfig()

        try:
            self.registry = InstrumentRegistry.from_config(self.config)
        except TradingException as e:
            logger.error(f"Failed to build instrument catalog: {e}")
            raise ConfigurationException(f"Instrument catalog is invalid: {e.message}")

        self.ledger = AccountLedger()
        self.transaction_log = TransactionLog()
        self.engine = TradingEngine(
            registry=self.registry,
            ledger=self.ledger,
            transaction_log=self.transaction_log
        )
        self.market = MarketSimulator(self.config, rng=rng)
        self.metrics_tracker = MetricsTracker(
            self.registry,
            self.ledger,
            self.transaction_log,
            history_limit=self.config.metrics_history_limit
        )
        self._init_time = datetime.now().isoformat()

        logger.info(f"Trading simulator ready with {len(self.registry)} instruments")

    def register_user(self, username: str, initial_balance: Number) -> Account:
        return self.ledger.register(username, initial_balance)

    def login(self, username: str) -> Session:
        """Resolve a username into a session handle."""
        account = self.ledger.lookup(username)
        logger.info(f"Login successful! Welcome, {account.username}")
        return Session(username=account.username)

    def buy(self, session: Optional[Session], symbol: str, quantity: int) -> TradeResult:
        return self.engine.execute_buy(session.username if session else None, symbol, quantity)

    def sell(self, session: Optional[Session], symbol: str, quantity: int) -> TradeResult:
        return self.engine.execute_sell(session.username if session else None, symbol, quantity)

    def simulate_market(self) -> None:
        """Run one market tick and record fresh portfolio metrics."""
        self.market.tick(self.registry)
        self.metrics_tracker.update_metrics()

    def market_data(self) -> List[Dict[str, Any]]:
        """Current prices with change since the previous tick."""
        rows = []
        for snapshot in self.registry.list_instruments():
            change, change_pct = self.registry.price_change(snapshot.symbol)
            rows.append({
                'symbol': snapshot.symbol,
                'name': snapshot.name,
                'price': snapshot.price,
                'previous_price': snapshot.previous_price,
                'change': change,
                'change_pct': change_pct
            })
        return rows

    def portfolio(self, session: Optional[Session]) -> Dict[str, Any]:
        if not session:
            raise NotLoggedInException("Please login first!")
        account = self.ledger.lookup(session.username)
        self.ledger.log_portfolio_state(account, self.registry)
        return self.ledger.get_portfolio_metrics(account, self.registry)

    def recent_transactions(self, n: Optional[int] = None) -> List[TradeRecord]:
        return self.transaction_log.recent(n if n is not None else self.config.recent_limit)

    def get_current_state(self) -> Dict[str, Any]:
        """Get a summary of the whole simulator."""
        return {
            'instruments': len(self.registry),
            'accounts': len(self.ledger),
            'transactions': len(self.transaction_log),
            'ticks': self.market.tick_count,
            'config': {
                'price_floor': self.config.price_floor,
                'max_move': self.config.max_move,
                'recent_limit': self.config.recent_limit
            },
            'initialization_time': self._init_time
        }
