"""Errors raised by weatherlog. The CLI maps all of them to exit code 2."""


class WeatherlogError(Exception):
    """Base error for this package."""


class RecordError(WeatherlogError):
    """A record could not be built from user input or a stored line."""


class InvalidItem(RecordError):
    """An add token has no '='."""


class UnknownField(RecordError):
    """An add token names a field outside FIELDS."""


class InvalidValue(RecordError):
    """A value contains the reserved '|' separator."""


class MalformedSegment(RecordError):
    """A stored line has a segment without '='."""


class StoreIOError(WeatherlogError):
    """Filesystem failure while touching the store."""


class UnknownCommand(WeatherlogError):
    """The first argument is not a known command."""


class ConfigError(WeatherlogError):
    """An environment override holds an invalid value."""
