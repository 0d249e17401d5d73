"""
Tests for the random market tick: bounds, floor and reproducibility.
"""

import random
from decimal import Decimal

from trading_sim import SimulatorConfig
from trading_sim.core import InstrumentRegistry, MarketSimulator


def test_tick_moves_stay_within_five_percent(registry, config):
    market = MarketSimulator(config, rng=random.Random(7))

    for _ in range(200):
        before = {i.symbol: i.price for i in registry}
        market.tick(registry)
        for instrument in registry:
            pre = before[instrument.symbol]
            assert pre * Decimal("0.95") <= instrument.price <= pre * Decimal("1.05")
            assert instrument.price >= Decimal("1.00")
            assert instrument.previous_price == pre
            assert instrument.price_history[-1] == instrument.price

    assert market.tick_count == 200
    assert len(registry.price_history("AAPL")) == 201


def test_tick_clamps_to_price_floor():
    config = SimulatorConfig(instruments=[])
    registry = InstrumentRegistry()
    registry.add("PENNY", "Penny Corp.", Decimal("1.00"))

    class AlwaysDown(random.Random):
        def uniform(self, a, b):
            return a

    MarketSimulator(config, rng=AlwaysDown()).tick(registry)
    assert registry.get_price("PENNY") == Decimal("1.00")
    assert registry.price_history("PENNY") == [Decimal("1.00"), Decimal("1.00")]


def test_extreme_draws_hit_exact_bounds():
    registry = InstrumentRegistry()
    registry.add("UP", "Up Corp.", Decimal("100"))

    class AlwaysUp(random.Random):
        def uniform(self, a, b):
            return b

    MarketSimulator(SimulatorConfig(), rng=AlwaysUp()).tick(registry)
    assert registry.get_price("UP") == Decimal("105.00")


def test_same_seed_gives_same_prices():
    first = InstrumentRegistry.from_config(SimulatorConfig())
    second = InstrumentRegistry.from_config(SimulatorConfig())

    MarketSimulator(SimulatorConfig(seed=99)).tick(first)
    MarketSimulator(SimulatorConfig(seed=99)).tick(second)

    assert [s.price for s in first.list_instruments()] == [s.price for s in second.list_instruments()]


def test_perturbations_are_independent_per_instrument(registry, config):
    MarketSimulator(config, rng=random.Random(3)).tick(registry)
    changes = {registry.price_change(i.symbol)[1] for i in registry}
    assert len(changes) > 1


def test_catalog_never_below_floor():
    config = SimulatorConfig(price_floor=Decimal("150.00"), max_move=Decimal("0.05"))
    registry = InstrumentRegistry.from_config(config)
    market = MarketSimulator(config, rng=random.Random(11))

    for instrument in registry:
        assert instrument.price >= config.price_floor

    for _ in range(100):
        before = {i.symbol: i.price for i in registry}
        market.tick(registry)
        for instrument in registry:
            pre = before[instrument.symbol]
            assert pre >= config.price_floor
            assert instrument.price >= config.price_floor
            assert instrument.price <= pre * Decimal("1.05")
