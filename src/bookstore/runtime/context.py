"""Current configuration, held in a context variable.

The configuration is loaded once at import. ``with_context`` overlays a
partial ``ConfigData`` for the duration of a block; only the fields the
override explicitly sets replace the current values.
"""

from contextlib import contextmanager
from contextvars import ContextVar

from pydantic import BaseModel

from src.bookstore.runtime.config.config_data import ConfigData
from src.bookstore.runtime.config.config_template import load_config

_current_config: ContextVar[ConfigData] = ContextVar(
    "bookstore_config", default=load_config()
)


def get_config() -> ConfigData:
    """Return the configuration in effect for the caller."""
    return _current_config.get()


def set_config(config: ConfigData) -> None:
    """Replace the whole configuration for the current context."""
    _current_config.set(config)


def _overlay(base: BaseModel, override: BaseModel) -> BaseModel:
    """Copy ``base`` with every field explicitly set on ``override``.

    Nested models are overlaid field by field. A nested model that was
    assigned as a whole but carries no explicit fields of its own replaces
    the base value outright.
    """
    updates = {}
    for name in type(override).model_fields:
        value = getattr(override, name)
        if isinstance(value, BaseModel):
            current = getattr(base, name)
            merged = _overlay(current, value)
            if merged is not current:
                updates[name] = merged
            elif name in override.model_fields_set:
                updates[name] = value
        elif name in override.model_fields_set:
            updates[name] = value
    return base.model_copy(update=updates) if updates else base


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Temporarily overlay ``config_override`` on the current configuration.

    Example:
        override = ConfigData()
        override.books.error_header = "x-book-error"
        with with_context(override):
            assert get_config().books.error_header == "x-book-error"
    """
    if config_override is None:
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    token = _current_config.set(_overlay(get_config(), config_override))
    try:
        yield
    finally:
        _current_config.reset(token)
