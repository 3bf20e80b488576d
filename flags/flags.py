"""Flags class for managing flag values with validation."""

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Type

from .errors import UnknownFlagError
from .registry import FlagRegistry, LegacyCryptoRegistry


class Flags:
    """Container for the flag values of one vocabulary."""

    def __init__(self, registry: Type[FlagRegistry] = LegacyCryptoRegistry):
        # Initialize all flags with their default values
        self._registry = registry
        self._definitions = registry.get_all_flags()
        self._values: Dict[str, Any] = {
            key: defn.get_default()
            for key, defn in self._definitions.items()
        }

    def __getattr__(self, key: str) -> Any:
        """Access flags as attributes: flags.MBEDTLS_MD_C"""
        if key.startswith('_'):
            # Allow normal attribute access for private attributes
            return object.__getattribute__(self, key)

        if key in self._values:
            return self._values[key]

        raise AttributeError(f"Flag '{key}' not found")

    def __setattr__(self, key: str, value: Any):
        """Set flags as attributes: flags.MBEDTLS_MD_C = True"""
        if key.startswith('_'):
            # Allow normal attribute setting for private attributes
            object.__setattr__(self, key, value)
            return

        self.set(key, value)

    def __getitem__(self, key: str) -> Any:
        if key not in self._values:
            raise UnknownFlagError(key, f"not in {self._registry.__name__}")
        return self._values[key]

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self):
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Flags):
            return NotImplemented
        return self._registry is other._registry and self._values == other._values

    def __repr__(self) -> str:
        return f"Flags({self._registry.__name__}, active={self.active()})"

    @property
    def registry(self) -> Type[FlagRegistry]:
        return self._registry

    def get(self, key: str, default: Any = None) -> Any:
        """Get flag value with optional default."""
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set flag value with validation."""
        if key not in self._definitions:
            raise UnknownFlagError(key, f"not in {self._registry.__name__}")

        definition = self._definitions[key]
        validated_value = definition.validate(value)
        self._values[key] = validated_value

    def active(self) -> List[str]:
        """Keys of every active flag, sorted."""
        return sorted(key for key, value in self._values.items() if value)

    def to_dict(self, public_only: bool = False) -> Dict[str, Any]:
        """
        Export flags to dictionary.

        Args:
            public_only: If True, exclude internal helper flags
        """
        result = {}
        for key, value in self._values.items():
            if public_only and not self._definitions[key].is_public:
                continue
            result[key] = value
        return result

    def from_dict(self, data: Mapping[str, Any]) -> None:
        """Import flags from a mapping.

        Every key is checked before anything is assigned, so a rejected
        mapping leaves the container untouched.
        """
        validated = {}
        for key, value in data.items():
            if key not in self._definitions:
                raise UnknownFlagError(key, f"not in {self._registry.__name__}")
            validated[key] = self._definitions[key].validate(value)
        self._values.update(validated)

    def snapshot(self) -> Mapping[str, bool]:
        """Read-only copy of the current values."""
        return MappingProxyType(dict(self._values))

    def copy(self) -> 'Flags':
        duplicate = Flags(self._registry)
        duplicate._values = dict(self._values)
        return duplicate
