from collections import deque
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Deque, List, Optional

import pandas as pd
from loguru import logger

from trading_sim.core import AccountLedger, InstrumentRegistry, TransactionLog

@dataclass
class PortfolioMetrics:
    '''Point-in-time valuation of one account'''
    timestamp: datetime
    username: str
    cash: Decimal
    holdings_value: Decimal
    total_value: Decimal
    positions: int

class MetricsTracker:
    '''Track portfolio snapshots and expose history as DataFrames'''

    def __init__(
        self,
        registry: InstrumentRegistry,
        ledger: AccountLedger,
        transaction_log: TransactionLog,
        history_limit: Optional[int] = None
    ):
        self.registry = registry
        self.ledger = ledger
        self.transaction_log = transaction_log
        # Oldest snapshots fall off once history_limit is reached
        self.metrics_history: Deque[PortfolioMetrics] = deque(maxlen=history_limit)

    def update_metrics(self) -> List[PortfolioMetrics]:
        '''Snapshot every registered account at current prices'''
        metrics = []
        now = datetime.now()

        for account in self.ledger.accounts():
            summary = self.ledger.get_portfolio_metrics(account, self.registry)
            metric = PortfolioMetrics(
                timestamp=now,
                username=account.username,
                cash=summary['cash'],
                holdings_value=summary['holdings_value'],
                total_value=summary['total_value'],
                positions=len(summary['positions'])
            )
            metrics.append(metric)
            self.metrics_history.append(metric)

        logger.debug(f"Recorded metrics for {len(metrics)} accounts")
        return metrics

    def get_metrics_df(self) -> pd.DataFrame:
        '''Convert metrics history to DataFrame'''
        return pd.DataFrame([vars(m) for m in self.metrics_history])

    def get_trades_df(self, username: Optional[str] = None) -> pd.DataFrame:
        '''Trade history, optionally for a single user'''
        records = self.transaction_log.for_user(username) if username else list(self.transaction_log)
        columns = ['timestamp', 'side', 'symbol', 'quantity', 'price', 'username', 'total']
        if not records:
            return pd.DataFrame(columns=columns)
        return pd.DataFrame([
            {
                'timestamp': r.timestamp,
                'side': r.side.value,
                'symbol': r.symbol,
                'quantity': r.quantity,
                'price': float(r.price),
                'username': r.username,
                'total': float(r.total)
            }
            for r in records
        ], columns=columns)

    def get_price_history_df(self) -> pd.DataFrame:
        '''One column per symbol, one row per tick'''
        return pd.DataFrame({
            instrument.symbol: pd.Series([float(p) for p in instrument.price_history])
            for instrument in self.registry
        })

    def get_value_history(self, username: str) -> pd.DataFrame:
        '''Total value over time for one account'''
        df = self.get_metrics_df()
        if len(df) == 0:
            return pd.DataFrame()
        return df[df['username'] == username][['timestamp', 'total_value']].reset_index(drop=True)
