"""
Instrument registry module.
"""

from decimal import Decimal
from typing import Dict, Iterator, List, Optional, Tuple
from loguru import logger

from trading_sim.trading_types import Instrument, InstrumentSnapshot, Number, to_decimal
from trading_sim.config import SimulatorConfig
from trading_sim.exceptions import AlreadyExistsException, InstrumentNotFoundException, ValidationException


class InstrumentRegistry:
    """Holds the catalog of tradable instruments and their price state."""

    def __init__(self, instruments: Optional[List[Instrument]] = None):
        self._instruments: Dict[str, Instrument] = {}
        for instrument in instruments or []:
            self._register(instrument)

    @classmethod
    def from_config(cls, config: SimulatorConfig) -> 'InstrumentRegistry':
        """Build a registry seeded with the configured catalog."""
        registry = cls()
        for spec in config.instruments:
            if spec.price < config.price_floor:
                raise ValidationException(
                    f"Catalog price for {spec.symbol} is below the floor {config.price_floor}",
                    context={'symbol': spec.symbol, 'price': str(spec.price)}
                )
            registry.add(spec.symbol, spec.name, spec.price)
        logger.debug(f"Instrument registry seeded with {len(registry)} instruments")
        return registry

    def add(self, symbol: str, name: str, price: Number) -> Instrument:
        """Add a new instrument to the catalog."""
        return self._register(Instrument(symbol=symbol, name=name, price=to_decimal(price)))

    def get_instrument(self, symbol: str) -> Instrument:
        instrument = self._instruments.get(symbol.upper())
        if instrument is None:
            raise InstrumentNotFoundException(
                f"Stock not found: {symbol}",
                context={'symbol': symbol}
            )
        return instrument

    def get_price(self, symbol: str) -> Decimal:
        """Current price of a symbol."""
        return self.get_instrument(symbol).price

    def update_price(self, symbol: str, new_price: Number) -> None:
        """Move the current price to previous and record the new one.

        The minimum price floor is the caller's concern; the registry stores
        whatever it is given.
        """
        instrument = self.get_instrument(symbol)
        old_price = instrument.price
        instrument.update_price(new_price)
        logger.debug(f"Price update {instrument.symbol}: {old_price:.4f} -> {instrument.price:.4f}")

    def price_change(self, symbol: str) -> Tuple[Decimal, Decimal]:
        """Return (delta, delta percent) relative to the previous price."""
        instrument = self.get_instrument(symbol)
        return instrument.price_change, instrument.price_change_percent

    def price_history(self, symbol: str) -> List[Decimal]:
        return list(self.get_instrument(symbol).price_history)

    def list_instruments(self) -> List[InstrumentSnapshot]:
        """Snapshots of every instrument, ordered by symbol."""
        return [self._instruments[symbol].snapshot() for symbol in sorted(self._instruments)]

    def _register(self, instrument: Instrument) -> Instrument:
        if instrument.symbol in self._instruments:
            raise AlreadyExistsException(
                f"Instrument already exists: {instrument.symbol}",
                context={'symbol': instrument.symbol}
            )
        self._instruments[instrument.symbol] = instrument
        return instrument

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and symbol.upper() in self._instruments

    def __iter__(self) -> Iterator[Instrument]:
        return iter([self._instruments[symbol] for symbol in sorted(self._instruments)])

    def __len__(self) -> int:
        return len(self._instruments)
