from decimal import Decimal

import pytest
from pydantic import ValidationError

from trading_sim import SimulatorConfig
from trading_sim.config import InstrumentSpec


def test_defaults():
    config = SimulatorConfig()
    assert config.price_floor == Decimal("1.00")
    assert config.max_move == Decimal("0.05")
    assert config.recent_limit == 10
    assert config.seed is None
    assert [spec.symbol for spec in config.instruments] == [
        "AAPL", "GOOGL", "MSFT", "TSLA", "AMZN", "NVDA", "META", "NFLX"
    ]


def test_from_env(monkeypatch):
    monkeypatch.setenv("SIM_PRICE_FLOOR", "2.50")
    monkeypatch.setenv("SIM_MAX_MOVE", "0.10")
    monkeypatch.setenv("SIM_SEED", "17")
    monkeypatch.setenv("SIM_RECENT_LIMIT", "25")
    monkeypatch.setenv("SIM_LOG_LEVEL", "DEBUG")

    config = SimulatorConfig.from_env()
    assert config.price_floor == Decimal("2.50")
    assert config.max_move == Decimal("0.10")
    assert config.seed == 17
    assert config.recent_limit == 25
    assert config.log_level == "DEBUG"


def test_invalid_values_rejected():
    with pytest.raises(ValidationError):
        SimulatorConfig(price_floor=Decimal("0"))
    with pytest.raises(ValidationError):
        SimulatorConfig(recent_limit=0)
    with pytest.raises(ValidationError):
        InstrumentSpec(symbol="BAD", name="Bad", price=Decimal("-1"))


def test_instrument_symbol_uppercased():
    assert InstrumentSpec(symbol=" ibm ", name="IBM", price=Decimal("1")).symbol == "IBM"


def test_catalog_below_floor_rejected():
    with pytest.raises(ValidationError, match="below floor"):
        SimulatorConfig(instruments=[
            InstrumentSpec(symbol="PNY", name="Penny Corp.", price=Decimal("0.50"))
        ])

    with pytest.raises(ValidationError, match="AAPL"):
        SimulatorConfig(price_floor=Decimal("200"))


def test_catalog_at_floor_accepted():
    config = SimulatorConfig(instruments=[
        InstrumentSpec(symbol="PNY", name="Penny Corp.", price=Decimal("1.00"))
    ])
    assert config.instruments[0].price == config.price_floor


def test_metrics_history_limit_from_env(monkeypatch):
    monkeypatch.setenv("SIM_METRICS_HISTORY", "50")
    assert SimulatorConfig.from_env().metrics_history_limit == 50
