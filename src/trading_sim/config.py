from decimal import Decimal
from typing import List, Optional
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator, model_validator


class InstrumentSpec(BaseModel):
    """Catalog entry used to seed the instrument registry"""
    symbol: str
    name: str
    price: Decimal = Field(gt=0)

    @field_validator("symbol")
    @classmethod
    def upper_symbol(cls, value: str) -> str:
        return value.strip().upper()


DEFAULT_INSTRUMENTS = [
    InstrumentSpec(symbol="AAPL", name="Apple Inc.", price=Decimal("150.00")),
    InstrumentSpec(symbol="GOOGL", name="Alphabet Inc.", price=Decimal("2500.00")),
    InstrumentSpec(symbol="MSFT", name="Microsoft Corp.", price=Decimal("300.00")),
    InstrumentSpec(symbol="TSLA", name="Tesla Inc.", price=Decimal("800.00")),
    InstrumentSpec(symbol="AMZN", name="Amazon.com Inc.", price=Decimal("3200.00")),
    InstrumentSpec(symbol="NVDA", name="NVIDIA Corp.", price=Decimal("220.00")),
    InstrumentSpec(symbol="META", name="Meta Platforms Inc.", price=Decimal("320.00")),
    InstrumentSpec(symbol="NFLX", name="Netflix Inc.", price=Decimal("400.00")),
]


class SimulatorConfig(BaseModel):
    # Market settings
    price_floor: Decimal = Field(default=Decimal("1.00"), gt=0)
    max_move: Decimal = Field(default=Decimal("0.05"), ge=0, lt=1)
    seed: Optional[int] = None

    # Reporting settings
    recent_limit: int = Field(default=10, gt=0)
    metrics_history_limit: int = Field(default=10000, gt=0)

    # Logging settings
    log_dir: str = "logs"
    log_level: str = "INFO"

    instruments: List[InstrumentSpec] = Field(
        default_factory=lambda: [spec.model_copy() for spec in DEFAULT_INSTRUMENTS]
    )

    @model_validator(mode="after")
    def catalog_above_floor(self) -> "SimulatorConfig":
        below = [spec.symbol for spec in self.instruments if spec.price < self.price_floor]
        if below:
            raise ValueError(
                f"Instrument prices below floor {self.price_floor}: {', '.join(below)}"
            )
        return self

    @classmethod
    def from_env(cls):
        """Create configuration from environment variables"""
        load_dotenv()

        seed = os.getenv("SIM_SEED")

        return cls(
            price_floor=Decimal(os.getenv("SIM_PRICE_FLOOR", "1.00")),
            max_move=Decimal(os.getenv("SIM_MAX_MOVE", "0.05")),
            seed=int(seed) if seed else None,
            recent_limit=int(os.getenv("SIM_RECENT_LIMIT", "10")),
            metrics_history_limit=int(os.getenv("SIM_METRICS_HISTORY", "10000")),
            log_dir=os.getenv("SIM_LOG_DIR", "logs"),
            log_level=os.getenv("SIM_LOG_LEVEL", "INFO")
        )
