"""Default configuration parameters for the bubble dashboard."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FetchParams:
    """Upstream quote endpoint and CORS proxy relay parameters."""
    quote_host: str = "https://query1.finance.yahoo.com"
    chart_path: str = "/v8/finance/chart"
    interval: str = "1d"
    # Tried in this order; ``{url}`` receives the URL-encoded upstream URL
    proxy_templates: tuple = (
        "https://corsproxy.io/?{url}",
        "https://api.codetabs.com/v1/proxy?quest={url}",
        "https://api.allorigins.win/get?url={url}",     # wraps body as {"contents": "..."}
    )


@dataclass(frozen=True)
class WindowParams:
    """Date window and gap filling parameters for modern series."""
    window_start: str = "2020-01-01"         # UTC midnight
    min_density: int = 100                   # Below this many candles, gap fill
    max_gap_days: int = 7                    # Nearest neighbour must be closer than this


@dataclass(frozen=True)
class CacheParams:
    """Time-to-live windows for the in-memory caches."""
    series_ttl_ms: int = 60_000
    roster_ttl_ms: int = 3_600_000


@dataclass(frozen=True)
class DownsampleParams:
    """Rendering point budget."""
    max_points: int = 500


@dataclass(frozen=True)
class RefreshParams:
    """Auto-refresh timers for the AI chart view."""
    update_interval_seconds: float = 30.0
    countdown_interval_seconds: float = 1.0
    auto_update: bool = True


@dataclass(frozen=True)
class SyntheticParams:
    """Dotcom bubble synthetic series shape."""
    samples: int = 200
    start_date: str = "1995-01-01"
    peak_date: str = "2000-03-10"
    crash_date: str = "2002-10-09"
    end_date: str = "2003-12-31"
    base_price: float = 50.0
    peak_price: float = 500.0
    crash_price: float = 100.0
    min_volatility: float = 5.0
    volatility_range: float = 15.0


@dataclass(frozen=True)
class ChartParams:
    """Display metadata handed to the rendering collaborator."""
    series_name: str = "Candlestick"
    dotcom_title: str = "Dotcom Bubble (1995-2003)"
    ai_title_format: str = "{symbol} (2020-Present)"
    default_viewport_width: int = 1280


@dataclass(frozen=True)
class LoggingParams:
    """structlog output settings."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    fetch: FetchParams = field(default_factory=FetchParams)
    window: WindowParams = field(default_factory=WindowParams)
    cache: CacheParams = field(default_factory=CacheParams)
    downsample: DownsampleParams = field(default_factory=DownsampleParams)
    refresh: RefreshParams = field(default_factory=RefreshParams)
    synthetic: SyntheticParams = field(default_factory=SyntheticParams)
    chart: ChartParams = field(default_factory=ChartParams)
    logging: LoggingParams = field(default_factory=LoggingParams)


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        fetch=FetchParams(),
        window=WindowParams(),
        cache=CacheParams(),
        downsample=DownsampleParams(),
        refresh=RefreshParams(),
        synthetic=SyntheticParams(),
        chart=ChartParams(),
        logging=LoggingParams(),
    )
