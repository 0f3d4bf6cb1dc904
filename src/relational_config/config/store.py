"""
Read-only key/value store holding a connector's raw configuration.
"""

import collections.abc
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Union

from relational_config.exceptions import ConfigurationError


class Configuration(collections.abc.Mapping):
    """
    Immutable mapping from option name to raw string value.

    Typed getters accept either an option name or a ``ConfigField``; when a
    field is given and the key is absent, the field's default is returned.
    """

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values = MappingProxyType(dict(values or {}))

    @classmethod
    def from_dict(cls, values: Mapping[str, object]) -> "Configuration":
        """Build a configuration from arbitrary scalars, skipping None values."""
        converted = {}
        for key, value in values.items():
            if value is None:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            converted[key] = str(value)
        return cls(converted)

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Configuration({dict(self._values)!r})"

    def get_string(self, key, default: Optional[str] = None) -> Optional[str]:
        """Return the raw value, or the default when the key is absent."""
        name, field_default = _resolve_key(key)
        if name in self._values:
            return self._values[name]
        return default if default is not None else field_default

    def get_boolean(self, key, default: Optional[bool] = None) -> Optional[bool]:
        """Return the value as a boolean; raises ConfigurationError if it is not one."""
        value = self.get_string(key)
        if value is None:
            return default
        normalized = value.strip().lower()
        if normalized == "true":
            return True
        if normalized == "false":
            return False
        raise ConfigurationError(
            f"Value '{value}' of '{_resolve_key(key)[0]}' is not a boolean"
        )

    def get_integer(self, key, default: Optional[int] = None) -> Optional[int]:
        """Return the value as an integer; raises ConfigurationError if it is not one."""
        value = self.get_string(key)
        if value is None:
            return default
        try:
            return int(value.strip())
        except ValueError as e:
            raise ConfigurationError(
                f"Value '{value}' of '{_resolve_key(key)[0]}' is not an integer"
            ) from e

    def with_values(self, overrides: Mapping[str, str]) -> "Configuration":
        """Return a new configuration with the given values layered on top."""
        return Configuration({**self._values, **overrides})


def _resolve_key(key: Union[str, object]):
    if isinstance(key, str):
        return key, None
    return key.name, key.default_value
