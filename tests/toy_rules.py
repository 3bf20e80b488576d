"""Small vocabulary shared by the rule engine tests."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from flags import BooleanFlag, FlagCategory, FlagRegistry


def _flag(key: str, category: FlagCategory = FlagCategory.MODULE) -> BooleanFlag:
    return BooleanFlag(key, key.title(), f'Test flag {key}.', category)


class ToyRegistry(FlagRegistry):
    """Independent flags for exercising rule shapes."""
    A = _flag('A')
    B = _flag('B', FlagCategory.INTERNAL)
    C = _flag('C', FlagCategory.INTERNAL)
    X = _flag('X')
    Y = _flag('Y')
    Z = _flag('Z', FlagCategory.INTERNAL)
    W = _flag('W', FlagCategory.INTERNAL)
    P = _flag('P', FlagCategory.INTERNAL)
    Q = _flag('Q', FlagCategory.INTERNAL)
    MODE = _flag('MODE', FlagCategory.FEATURE)
    ALT = _flag('ALT', FlagCategory.INTERNAL)
    META = _flag('META', FlagCategory.INTERNAL)


ALL_KEYS = sorted(ToyRegistry.get_all_flags())
