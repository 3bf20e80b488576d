"""
Flag vocabulary for the legacy crypto configuration.

Key features:
- Inline definitions with display names and help text
- Vocabularies declared as FlagRegistry subclasses
- Public vs internal helper flags via categories
- Type validation, unknown names rejected
"""

from .categories import FlagCategory
from .definitions import BooleanFlag, FlagDefinition
from .errors import ConfigurationError, UnknownFlagError
from .registry import FlagRegistry, LegacyCryptoRegistry
from .flags import Flags

__all__ = [
    'FlagCategory',
    'BooleanFlag',
    'FlagDefinition',
    'ConfigurationError',
    'UnknownFlagError',
    'FlagRegistry',
    'LegacyCryptoRegistry',
    'Flags',
]
