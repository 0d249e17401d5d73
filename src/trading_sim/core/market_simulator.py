"""
Market simulation module.
"""

import random
from decimal import Decimal
from typing import Optional
from loguru import logger

from trading_sim.config import SimulatorConfig
from trading_sim.core.instrument_registry import InstrumentRegistry

PERTURBATION_QUANTUM = Decimal("0.000001")


class MarketSimulator:
    """Applies independent random price moves to every instrument."""

    def __init__(
        self,
        config: Optional[SimulatorConfig] = None,
        rng: Optional[random.Random] = None
    ):
        self.config = config or SimulatorConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.tick_count = 0

    def draw_perturbation(self) -> Decimal:
        """Uniform draw in [-max_move, +max_move]."""
        max_move = self.config.max_move
        raw = self.rng.uniform(-float(max_move), float(max_move))
        perturbation = Decimal(str(raw)).quantize(PERTURBATION_QUANTUM)
        return min(max(perturbation, -max_move), max_move)

    def tick(self, registry: InstrumentRegistry) -> None:
        """Move every instrument's price once."""
        floor = self.config.price_floor

        for instrument in registry:
            perturbation = self.draw_perturbation()
            new_price = instrument.price * (1 + perturbation)
            if new_price < floor:
                logger.debug(f"{instrument.symbol} clamped to floor ${floor:.2f}")
                new_price = floor
            registry.update_price(instrument.symbol, new_price)

        self.tick_count += 1
        logger.info(f"Market tick #{self.tick_count} applied to {len(registry)} instruments")
