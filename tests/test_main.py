from loguru import logger

from trading_sim.main import run_simulation


def test_run_simulation_from_env(monkeypatch, tmp_path):
    log_dir = tmp_path / "logs"
    monkeypatch.setenv("SIM_LOG_DIR", str(log_dir))
    monkeypatch.setenv("SIM_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("SIM_SEED", "5")

    try:
        simulator = run_simulation(ticks=3)
    finally:
        logger.remove()

    assert simulator.market.tick_count == 3
    assert simulator.config.log_level == "WARNING"
    assert len(simulator.registry.price_history("AAPL")) == 4

    log_files = list(log_dir.glob("trading_sim_*.log"))
    assert len(log_files) == 1
    contents = log_files[0].read_text()
    assert "Market tick #3" in contents
    assert "AAPL" in contents


def test_same_seed_same_market(monkeypatch, tmp_path):
    monkeypatch.setenv("SIM_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("SIM_SEED", "21")

    try:
        first = run_simulation(ticks=2)
        second = run_simulation(ticks=2)
    finally:
        logger.remove()

    assert first.market_data() == second.market_data()
