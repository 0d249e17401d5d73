from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from trading_sim.config import SimulatorConfig

# Create rich console with custom theme
console = Console(theme=Theme({
    "info": "cyan",
    "warning": "yellow",
    "error": "red bold",
    "success": "green",
    "timestamp": "dim cyan",
    "price": "bright_green",
    "trade": "bright_yellow"
}))

def setup_logging(config: Optional[SimulatorConfig] = None) -> None:
    """Configure logging with custom format and handlers"""
    config = config or SimulatorConfig()

    # Remove default handler
    logger.remove()

    # Add custom handler for file logging
    log_dir = Path(config.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    logger.add(
        str(log_dir / "trading_sim_{time:YYYY-MM-DD}.log"),
        rotation="12:00",
        retention="7 days",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}",
        level="DEBUG"
    )

    # Add custom handler for console output
    logger.add(
        console_handler,
        format="{message}",
        level=config.log_level
    )

def console_handler(message: Any) -> None:
    """Custom console handler with rich formatting"""
    record: Dict[str, Any] = message.record
    time_str = record["time"].strftime("%H:%M:%S")
    level_name = record["level"].name
    text = escape(str(record["message"]))

    if level_name == "ERROR":
        console.print(f"[timestamp]{time_str}[/] [error]{text}[/]")
    elif level_name == "WARNING":
        console.print(f"[timestamp]{time_str}[/] [warning]{text}[/]")
    elif level_name == "SUCCESS":
        console.print(f"[timestamp]{time_str}[/] [success]{text}[/]")
    elif text.startswith("Placing"):
        console.print(f"[timestamp]{time_str}[/] [trade]{text}[/]")
    elif "tick" in text.lower():
        console.print(f"[timestamp]{time_str}[/] [price]{text}[/]")
    else:
        console.print(f"[timestamp]{time_str}[/] [info]{text}[/]")
