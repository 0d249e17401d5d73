import os
from typing import Optional

from loguru import logger

from trading_sim.config import SimulatorConfig
from trading_sim.logging_utils import setup_logging, console
from trading_sim.simulator import TradingSimulator


def initialize_config() -> SimulatorConfig:
    config = SimulatorConfig.from_env()

    logger.info(f"Initialized configuration with {len(config.instruments)} instruments")
    logger.debug(f"Price floor: {config.price_floor}")
    logger.debug(f"Max move per tick: {config.max_move:.2%}")
    logger.debug(f"Seed: {config.seed}")

    return config

def log_market(simulator: TradingSimulator) -> None:
    for row in simulator.market_data():
        logger.info(
            f"{row['symbol']:<6} {row['name']:<20} price ${row['price']:,.2f} "
            f"({row['change']:+.2f}, {row['change_pct']:+.2f}%)"
        )

def run_simulation(ticks: Optional[int] = None) -> TradingSimulator:
    """Build a simulator from the environment and advance the market."""
    config = initialize_config()
    setup_logging(config)

    if ticks is None:
        ticks = int(os.getenv("SIM_TICKS", "1"))

    simulator = TradingSimulator(config)
    for _ in range(ticks):
        simulator.simulate_market()
    log_market(simulator)

    return simulator

def main() -> None:
    run_simulation()

if __name__ == '__main__':
    try:
        main()
    except KeyboardInterrupt:
        console.print("\n[yellow]Shutting down...[/]")
