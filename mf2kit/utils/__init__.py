"""Utils package initialization."""
from mf2kit.utils.logger import (
    get_logger,
    ComponentLogger,
    configure_logging,
    set_trace_id,
    get_trace_id,
)

__all__ = ["get_logger", "ComponentLogger", "configure_logging", "set_trace_id", "get_trace_id"]
