"""
Trading Sim - In-memory Stock Trading Simulator

Simulated instrument prices, cash accounts and a transaction log.
"""

from .simulator import TradingSimulator
from .config import SimulatorConfig

__version__ = "1.0.0"
__all__ = ["TradingSimulator", "SimulatorConfig"]
