import random
import sys
from pathlib import Path

import pytest

# Allow running the suite from a checkout without installing the package
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from trading_sim import SimulatorConfig, TradingSimulator
from trading_sim.core import AccountLedger, InstrumentRegistry, TradingEngine, TransactionLog


@pytest.fixture
def config(tmp_path):
    return SimulatorConfig(seed=1234, log_dir=str(tmp_path / "logs"))


@pytest.fixture
def registry(config):
    return InstrumentRegistry.from_config(config)


@pytest.fixture
def ledger():
    return AccountLedger()


@pytest.fixture
def transaction_log():
    return TransactionLog()


@pytest.fixture
def engine(registry, ledger, transaction_log):
    return TradingEngine(registry, ledger, transaction_log)


@pytest.fixture
def simulator(config):
    return TradingSimulator(config, rng=random.Random(42))
