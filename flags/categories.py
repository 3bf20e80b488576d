"""Flag categories for grouping configuration symbols."""

from enum import IntEnum


class FlagCategory(IntEnum):
    """Categories for grouping configuration symbols."""
    MODULE = 1
    FEATURE = 2
    PSA = 3
    INTERNAL = 4  # Helper symbols the library derives on its own

    @property
    def display_name(self) -> str:
        """Get user-friendly display name for the category."""
        names = {
            FlagCategory.MODULE: "Library Modules",
            FlagCategory.FEATURE: "Module Features",
            FlagCategory.PSA: "PSA Crypto Requirements",
            FlagCategory.INTERNAL: "Internal Helpers (auto-enabled, not part of the public API)",
        }
        return names.get(self, "Unknown")

    @property
    def is_public(self) -> bool:
        """Whether users are expected to set flags in this category explicitly."""
        return self != FlagCategory.INTERNAL
