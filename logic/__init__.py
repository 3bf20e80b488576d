"""Rule engine for implied configuration flags.

Public API:
    Predicate, FlagRef, AllOf, AnyOf, Not - predicate trees
    all_of, any_of, not_, flag, ALWAYS - predicate helpers
    Rule, RuleTable, implies - implication rules
    ClosureResolver, Resolution - fixed point resolution
    LEGACY_CRYPTO_RULES, resolve_legacy_crypto - the shipped rule table

Example:
    from logic import resolve_legacy_crypto

    flags = resolve_legacy_crypto({'MBEDTLS_PK_PARSE_C': True, 'MBEDTLS_ECP_C': True})
    flags['MBEDTLS_PK_PARSE_EC_COMPRESSED']  # True
"""

from .errors import (
    ConfigurationError,
    NonConvergenceError,
    NonMonotonicRuleError,
    SelfReferentialRuleError,
    UnknownFlagError,
)
from .predicates import ALWAYS, AllOf, AnyOf, FlagRef, Not, Predicate, all_of, any_of, flag, not_
from .rules import Rule, RuleTable, implies
from .closure_resolver import ClosureResolver, Resolution
from .legacy_crypto_rules import LEGACY_CRYPTO_RULES, resolve_legacy_crypto

__all__ = [
    'ConfigurationError',
    'NonConvergenceError',
    'NonMonotonicRuleError',
    'SelfReferentialRuleError',
    'UnknownFlagError',
    'ALWAYS',
    'AllOf',
    'AnyOf',
    'FlagRef',
    'Not',
    'Predicate',
    'all_of',
    'any_of',
    'flag',
    'not_',
    'Rule',
    'RuleTable',
    'implies',
    'ClosureResolver',
    'Resolution',
    'LEGACY_CRYPTO_RULES',
    'resolve_legacy_crypto',
]
