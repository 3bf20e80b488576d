"""Implied flags of the legacy crypto configuration.

Users normally have to enable every module they need: enabling A without B
when A requires B is a configuration error. A few symbols are switched on
automatically instead, either because they are internal helpers that should
not be part of the public API, or because a module gained a dependency it
did not have in earlier releases and old configurations must keep working.
"""

from typing import Mapping

from flags import LegacyCryptoRegistry
from .closure_resolver import ClosureResolver
from .predicates import all_of, any_of, not_
from .rules import RuleTable, implies


LEGACY_CRYPTO_RULES = RuleTable(LegacyCryptoRegistry, [
    implies(
        'MBEDTLS_MD_C', 'MBEDTLS_MD_LIGHT',
        'MD_C is MD_LIGHT plus more, so code can test MD_LIGHT alone.'),
    implies(
        any_of(
            'MBEDTLS_ECJPAKE_C',
            'MBEDTLS_PEM_PARSE_C',
            'MBEDTLS_ENTROPY_C',
            'MBEDTLS_PK_C',
            'MBEDTLS_PKCS12_C',
            'MBEDTLS_RSA_C',
            'MBEDTLS_SSL_TLS_C',
            'MBEDTLS_X509_USE_C',
            'MBEDTLS_X509_CREATE_C'),
        'MBEDTLS_MD_LIGHT',
        'These modules did not require MD_LIGHT in earlier releases.'),
    implies(
        any_of(
            'MBEDTLS_ECP_C',
            'MBEDTLS_PK_PARSE_EC_EXTENDED',
            'MBEDTLS_PK_PARSE_EC_COMPRESSED',
            'MBEDTLS_PSA_BUILTIN_KEY_TYPE_ECC_KEY_PAIR_DERIVE'),
        'MBEDTLS_ECP_LIGHT',
        'ECP_C contains ECP_LIGHT; extended and compressed key parsing and '
        'Weierstrass key derivation are only available from the built-in curves.'),
    implies(
        all_of('MBEDTLS_PK_PARSE_C', 'MBEDTLS_ECP_C'),
        'MBEDTLS_PK_PARSE_EC_COMPRESSED',
        'Compressed points were supported whenever PK_PARSE_C and ECP_C were '
        'enabled before the option existed.'),
    implies(
        any_of(
            all_of('MBEDTLS_USE_PSA_CRYPTO', 'PSA_WANT_ALG_ECDH'),
            all_of(not_('MBEDTLS_USE_PSA_CRYPTO'), 'MBEDTLS_ECDH_C')),
        'MBEDTLS_CAN_ECDH',
        'ECDH is available through the library module or through PSA.'),

    # ECDSA in PK, without PSA
    implies(
        all_of(not_('MBEDTLS_USE_PSA_CRYPTO'), 'MBEDTLS_ECDSA_C'),
        'MBEDTLS_PK_CAN_ECDSA_SIGN',
        'The built-in ECDSA module signs.'),
    implies(
        all_of(not_('MBEDTLS_USE_PSA_CRYPTO'), 'MBEDTLS_ECDSA_C'),
        'MBEDTLS_PK_CAN_ECDSA_VERIFY',
        'The built-in ECDSA module verifies.'),

    # ECDSA in PK, through PSA
    implies(
        all_of(
            'MBEDTLS_USE_PSA_CRYPTO',
            'PSA_WANT_ALG_ECDSA',
            'PSA_WANT_KEY_TYPE_ECC_KEY_PAIR_BASIC'),
        'MBEDTLS_PK_CAN_ECDSA_SIGN',
        'PSA signs when ECDSA and ECC key pairs are both requested.'),
    implies(
        all_of(
            'MBEDTLS_USE_PSA_CRYPTO',
            'PSA_WANT_ALG_ECDSA',
            'PSA_WANT_KEY_TYPE_ECC_PUBLIC_KEY'),
        'MBEDTLS_PK_CAN_ECDSA_VERIFY',
        'PSA verifies when ECDSA and ECC public keys are both requested.'),

    implies(
        any_of('MBEDTLS_PK_CAN_ECDSA_VERIFY', 'MBEDTLS_PK_CAN_ECDSA_SIGN'),
        'MBEDTLS_PK_CAN_ECDSA_SOME',
        'Summary capability for code that needs either direction.'),
    implies(
        'MBEDTLS_PSA_CRYPTO_C', 'MBEDTLS_PSA_CRYPTO_CLIENT',
        'The PSA core includes all of the PSA client code.'),

    # PK wrappers format RSA keys with pk_write when dispatching to PSA
    implies(
        all_of('MBEDTLS_PSA_CRYPTO_C', 'MBEDTLS_RSA_C'), 'MBEDTLS_PK_C',
        'PK wrappers dispatch RSA keys to PSA.'),
    implies(
        all_of('MBEDTLS_PSA_CRYPTO_C', 'MBEDTLS_RSA_C'), 'MBEDTLS_PK_WRITE_C',
        'RSA key objects are exported with pk_write before reaching PSA.'),
    implies(
        all_of('MBEDTLS_PSA_CRYPTO_C', 'MBEDTLS_RSA_C'), 'MBEDTLS_PK_PARSE_C',
        'RSA key objects are imported with pk_parse when coming back from PSA.'),

    implies(
        any_of(
            'MBEDTLS_ECP_C',
            all_of('MBEDTLS_USE_PSA_CRYPTO', 'PSA_WANT_KEY_TYPE_ECC_PUBLIC_KEY')),
        'MBEDTLS_PK_HAVE_ECC_KEYS',
        'PK handles EC keys through the legacy ECP module or through PSA.'),
])

_resolver = ClosureResolver(LEGACY_CRYPTO_RULES)


def resolve_legacy_crypto(base: Mapping[str, bool]) -> Mapping[str, bool]:
    """Resolve a base configuration against the legacy crypto rules."""
    return _resolver.resolve(base)
