"""Flag definition classes."""

from typing import Any, Optional

from .categories import FlagCategory


class FlagDefinition:
    """Base class for flag definitions with inline metadata."""

    def __init__(
        self,
        key: str,
        display_name: str,
        help_text: str,
        category: FlagCategory,
        is_public: bool = None
    ):
        self.key = key
        self.display_name = display_name
        self.help_text = help_text
        self.category = category
        # Allow override, otherwise use category default
        self._is_public = is_public

    @property
    def is_public(self) -> bool:
        """Whether users are expected to set this flag explicitly."""
        if self._is_public is not None:
            return self._is_public
        return self.category.is_public

    def get_default(self) -> Any:
        """Get the default value for this flag."""
        raise NotImplementedError

    def validate(self, value: Any) -> Any:
        """Validate and convert value if needed. Returns validated value."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r})"


class BooleanFlag(FlagDefinition):
    """A simple boolean flag. Inactive unless the caller or a rule says otherwise."""

    def __init__(
        self,
        key: str,
        display_name: str,
        help_text: str,
        category: FlagCategory,
        is_public: Optional[bool] = None
    ):
        super().__init__(key, display_name, help_text, category, is_public)

    def get_default(self) -> bool:
        return False

    def validate(self, value: Any) -> bool:
        if not isinstance(value, bool):
            raise TypeError(f"Flag '{self.key}' expects boolean, got {type(value).__name__}")
        return value
