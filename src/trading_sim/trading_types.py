from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Dict, List, Optional, Union
import uuid

from trading_sim.exceptions import TradingException, ValidationException

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """Convert a numeric input to Decimal without binary float noise"""
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValidationException(f"Not a number: {value!r}", context={'value': value})


class OrderSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


@dataclass
class Instrument:
    """A tradable symbol with its current, previous and historical prices"""
    symbol: str
    name: str
    price: Decimal
    previous_price: Optional[Decimal] = None
    price_history: List[Decimal] = field(default_factory=list)

    def __post_init__(self):
        self.symbol = self.symbol.upper()
        self.price = to_decimal(self.price)
        if self.previous_price is None:
            self.previous_price = self.price
        if not self.price_history:
            self.price_history.append(self.price)

    def update_price(self, new_price: Number) -> None:
        new_price = to_decimal(new_price)
        self.previous_price = self.price
        self.price = new_price
        self.price_history.append(new_price)

    @property
    def price_change(self) -> Decimal:
        return self.price - self.previous_price

    @property
    def price_change_percent(self) -> Decimal:
        return self.price_change / self.previous_price * 100

    def snapshot(self) -> 'InstrumentSnapshot':
        return InstrumentSnapshot(
            symbol=self.symbol,
            name=self.name,
            price=self.price,
            previous_price=self.previous_price
        )

    def __str__(self) -> str:
        return (
            f"Instrument({self.symbol} {self.name} @ {self.price:.2f}, "
            f"change={self.price_change:+.2f})"
        )


@dataclass(frozen=True)
class InstrumentSnapshot:
    """Read-only view of an instrument for display"""
    symbol: str
    name: str
    price: Decimal
    previous_price: Decimal


@dataclass
class Account:
    """A registered user's cash balance and share holdings"""
    username: str
    balance: Decimal
    holdings: Dict[str, int] = field(default_factory=dict)

    def shares_of(self, symbol: str) -> int:
        return self.holdings.get(symbol.upper(), 0)

    def holdings_snapshot(self) -> Dict[str, int]:
        return dict(self.holdings)


@dataclass(frozen=True)
class TradeRecord:
    """Immutable log entry for one executed buy or sell"""
    username: str
    side: OrderSide
    symbol: str
    quantity: int
    price: Decimal
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def total(self) -> Decimal:
        return self.price * self.quantity

    def __str__(self) -> str:
        return (
            f"{self.timestamp:%Y-%m-%d %H:%M:%S} | {self.side.value} | {self.symbol} | "
            f"{self.quantity} shares @ ${self.price:.2f} | {self.username}"
        )


@dataclass(frozen=True)
class TradeResult:
    """Outcome of a trade request; failures carry the exception instead of raising it"""
    success: bool
    record: Optional[TradeRecord] = None
    error: Optional[TradingException] = None

    @property
    def code(self) -> Optional[str]:
        return self.error.code if self.error else None

    @property
    def message(self) -> str:
        if self.error:
            return self.error.message
        return "Trade executed" if self.success else "Trade failed"

    @classmethod
    def ok(cls, record: TradeRecord) -> 'TradeResult':
        return cls(success=True, record=record)

    @classmethod
    def failed(cls, error: TradingException) -> 'TradeResult':
        return cls(success=False, error=error)


@dataclass(frozen=True)
class Session:
    """Explicit handle for a logged-in account"""
    username: str
    token: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=datetime.now)
