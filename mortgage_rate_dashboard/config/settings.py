"""Configuration settings for the dashboard."""

from dataclasses import dataclass, field
from enum import Enum
import os

from dotenv import load_dotenv


load_dotenv()


# FRED series definitions
FRED_SERIES: dict[str, str] = {
    "DGS10": "10-Year Treasury Constant Maturity Rate",
    "MORTGAGE30US": "30-Year Fixed Rate Mortgage Average",
    "MORTGAGE15US": "15-Year Fixed Rate Mortgage Average",
    "CPIAUCSL": "Consumer Price Index for All Urban Consumers",
    "PCEPILFE": "Core PCE Price Index",
}

# Lender spread bounds (percentage points over the 10-year yield)
SPREAD_MIN = 1.2
SPREAD_MAX = 3.0
SPREAD_STEP = 0.05
DEFAULT_SPREAD = 1.9

SPREAD_PRESETS: dict[str, float] = {
    "Conservative": 1.5,  # Prime borrowers, excellent credit
    "Typical": 1.9,  # Good credit, standard loan terms
    "High-Risk": 2.4,  # Lower credit scores, higher risk factors
}

# 15-year loans carry a smaller markup than 30-year loans
FIFTEEN_YEAR_SPREAD_OFFSET = 0.4

# Inflation series are always requested this far back so a year-ago value exists
INFLATION_LOOKBACK_MONTHS = 15
MIN_INFLATION_OBSERVATIONS = 10


class Indicator(Enum):
    """Economic indicators the dashboard consumes, keyed by FRED series ID."""
    TEN_YEAR_YIELD = "DGS10"
    MORTGAGE_30 = "MORTGAGE30US"
    MORTGAGE_15 = "MORTGAGE15US"
    CPI = "CPIAUCSL"
    CORE_PCE = "PCEPILFE"

    @property
    def series_id(self) -> str:
        return self.value

    @property
    def title(self) -> str:
        return FRED_SERIES[self.value]

    @property
    def is_primary(self) -> bool:
        """Only the 10-year yield is required for a snapshot."""
        return self is Indicator.TEN_YEAR_YIELD

    @classmethod
    def from_series_id(cls, series_id: str) -> "Indicator":
        for indicator in cls:
            if indicator.value == series_id.upper():
                return indicator
        raise ValueError(f"Unknown series: {series_id}")


class TimeRange(Enum):
    """Selectable chart windows."""
    DAYS_30 = "30d"
    DAYS_90 = "90d"
    DAYS_180 = "180d"
    DAYS_365 = "365d"

    @property
    def days(self) -> int:
        """Calendar days to request for this range."""
        if self is TimeRange.DAYS_30:
            # Weekly mortgage data is published with a lag
            return 45
        return int(self.value[:-1])

    @classmethod
    def default(cls) -> "TimeRange":
        return cls.DAYS_90


@dataclass
class Settings:
    """Application settings."""

    fred_api_key: str = field(default_factory=lambda: os.getenv("FRED_API_KEY", ""))
    fred_base_url: str = field(
        default_factory=lambda: os.getenv(
            "FRED_BASE_URL", "https://api.stlouisfed.org/fred"
        )
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.getenv("FRED_TIMEOUT", "30"))
    )
    default_spread: float = field(
        default_factory=lambda: float(os.getenv("MORTGAGE_SPREAD", str(DEFAULT_SPREAD)))
    )

    def validate(self) -> None:
        """Validate required settings."""
        if not self.fred_api_key:
            raise ValueError(
                "FRED_API_KEY not set. Get one at: "
                "https://fred.stlouisfed.org/docs/api/api_key.html"
            )
        if not SPREAD_MIN <= self.default_spread <= SPREAD_MAX:
            raise ValueError(
                f"MORTGAGE_SPREAD must be between {SPREAD_MIN} and {SPREAD_MAX}, "
                f"got {self.default_spread}"
            )
