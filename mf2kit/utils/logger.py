"""
Structured logging for mf2kit.

mf2kit is a library: importing it leaves the host's structlog setup alone.
Components log through `structlog.get_logger`, so their events go through
whatever processors the application configured. `configure_logging()` is an
opt-in setup for scripts and tests that have none of their own.
"""
import uuid
from typing import Optional

import structlog

from mf2kit.config import config


def get_trace_id() -> str:
    """Trace ID bound to the current context, creating one if needed."""
    trace_id = structlog.contextvars.get_contextvars().get("trace_id")
    if not trace_id:
        trace_id = set_trace_id()
    return trace_id


def set_trace_id(trace_id: Optional[str] = None) -> str:
    """
    Bind a trace ID to the current context.

    Hosts that use `structlog.contextvars.merge_contextvars` will see it on
    every mf2kit event logged while resolving one document.
    """
    new_trace_id = trace_id or str(uuid.uuid4())[:8]
    structlog.contextvars.bind_contextvars(trace_id=new_trace_id)
    return new_trace_id


def configure_logging(level: Optional[int] = None, log_format: Optional[str] = None):
    """
    Install a structlog configuration from Config settings.

    Never called by mf2kit itself.
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if (log_format or config.LOG_FORMAT) == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            config.get_log_level() if level is None else level
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


def get_logger(name: str):
    """Logger for `name`, bound lazily to the host's structlog setup."""
    return structlog.get_logger(name)


class ComponentLogger:
    """
    Logger for one mf2kit component (flattener, query layer, resolvers).
    Every event carries the component name.
    """

    def __init__(self, component: str):
        self.component = component
        self.logger = get_logger(component)

    def log_decision(self, decision: str, reason: str, url: Optional[str] = None, **extra):
        """Which rule or tier produced a result."""
        self.logger.info(
            "decision_made",
            component=self.component,
            decision=decision,
            reason=reason,
            url=url,
            **extra
        )

    def log_action(self, action: str, status: str = "started", **extra):
        self.logger.debug(f"action_{status}", component=self.component, action=action, **extra)

    def log_fallback(self, from_source: str, to_source: str, reason: str, **extra):
        """Input was not walked as given (cycle, depth cutoff)."""
        self.logger.warning(
            "fallback_triggered",
            component=self.component,
            from_source=from_source,
            to_source=to_source,
            reason=reason,
            **extra
        )

    def log_error(self, error: str, error_type: str = "unknown", **extra):
        """Caller misuse, logged just before raising."""
        self.logger.error(
            "error_occurred",
            component=self.component,
            error=error,
            error_type=error_type,
            **extra
        )
