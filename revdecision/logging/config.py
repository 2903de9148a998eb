"""
Centralized logging configuration for the revenue decision engine.

All components log through structlog so that risk adjustments and
recommendations leave a structured audit trail. The calculators only
log at debug level; logging never influences a result.
"""
import logging
import sys
from typing import IO, Any, Optional

import structlog
from structlog.types import FilteringBoundLogger, Processor


def _build_processors(
    format_json: bool,
    include_timestamp: bool,
    include_caller: bool,
    extra_processors: Optional[list[Processor]],
) -> list[Processor]:
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.MODULE,
                        structlog.processors.CallsiteParameter.FUNC_NAME]
        ))

    processors.extend(extra_processors or [])

    # Renderer must come last
    if format_json:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    return processors


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list[Processor]] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Configure structlog for the entire application.

    Safe to call more than once; the last call wins.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Render JSON lines instead of console output
        include_timestamp: Add a UTC ISO timestamp to every entry
        include_caller: Add the calling module and function
        extra_processors: Processors inserted before the renderer
        stream: Output stream, stderr by default so reports can use stdout
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        stream=stream or sys.stderr,
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=_build_processors(format_json, include_timestamp, include_caller, extra_processors),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_risk_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for risk scoring decisions.

    The binding is deferred until first use, so loggers created at import
    time still pick up configure_logging.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for tier adjustments
    """
    return structlog.get_logger(name, subsystem="risk_scoring", audit_trail=True)


def log_tier_adjustment(
    logger: FilteringBoundLogger,
    check: str,
    from_tier: str,
    to_tier: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a risk tier adjustment with standardized format.

    Args:
        logger: Structlog logger instance
        check: Name of the check that moved (or kept) the tier
        from_tier: Tier before the check
        to_tier: Tier after the check
        context: Additional context data
    """
    bound_logger = logger.bind(
        check=check,
        from_tier=from_tier,
        to_tier=to_tier,
        changed=from_tier != to_tier,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Risk tier evaluated")


def log_recommendation(
    logger: FilteringBoundLogger,
    recommendation: str,
    net_business_income: float,
    passive_income: float,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the buy-versus-sell outcome with standardized format.

    Args:
        logger: Structlog logger instance
        recommendation: Recommendation label
        net_business_income: Monthly business income after the installment
        passive_income: Monthly passive income of the sell scenario
        context: Additional context data
    """
    bound_logger = logger.bind(
        recommendation=recommendation,
        net_business_income=net_business_income,
        passive_income=passive_income,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Recommendation computed")
