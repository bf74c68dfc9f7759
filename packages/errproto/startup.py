"""Process-level wiring of configuration into logging and stack capture."""

from __future__ import annotations

from packages.errproto.config import ErrprotoSettings, load_settings
from packages.errproto.errors import configure_stack
from packages.errproto.logging import configure_logging, get_logger

_LOGGER = get_logger(__name__)


def configure(settings: ErrprotoSettings | None = None) -> ErrprotoSettings:
    """Apply logging and stack settings; load them when not given."""
    resolved = settings if settings is not None else load_settings()
    configure_logging(
        level=resolved.logging.level,
        json_output=resolved.logging.json_output,
        service=resolved.logging.service,
        environment=resolved.logging.environment,
    )
    configure_stack(resolved.stack)
    _LOGGER.debug(
        "errproto configured",
        extra={
            "stack_enabled": resolved.stack.enabled,
            "trim_prefixes": list(resolved.stack.trim_prefixes),
        },
    )
    return resolved
