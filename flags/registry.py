"""Flag vocabularies.

A vocabulary is a ``FlagRegistry`` subclass whose class attributes are flag
definitions. ``LegacyCryptoRegistry`` holds every symbol the legacy crypto
configuration adjustment reads or derives.
"""

from typing import Dict, List

from .categories import FlagCategory
from .definitions import BooleanFlag, FlagDefinition
from .errors import UnknownFlagError


class FlagRegistry:
    """Base class for a finite vocabulary of flag definitions."""

    @classmethod
    def get_all_flags(cls) -> Dict[str, FlagDefinition]:
        """Get all flag definitions as a dictionary, in key order."""
        flags = {}
        for attr_name in dir(cls):
            attr = getattr(cls, attr_name)
            if isinstance(attr, FlagDefinition):
                flags[attr.key] = attr
        return dict(sorted(flags.items()))

    @classmethod
    def get_flag(cls, key: str) -> FlagDefinition:
        """Get a single definition, raising UnknownFlagError for foreign keys."""
        flags = cls.get_all_flags()
        if key not in flags:
            raise UnknownFlagError(key, f"not in {cls.__name__}")
        return flags[key]

    @classmethod
    def get_flags_by_category(cls) -> Dict[FlagCategory, List[FlagDefinition]]:
        """Get flags organized by category."""
        by_category = {}
        for flag in cls.get_all_flags().values():
            if flag.category not in by_category:
                by_category[flag.category] = []
            by_category[flag.category].append(flag)
        return by_category


class LegacyCryptoRegistry(FlagRegistry):
    """Symbols of the legacy crypto configuration."""

    # Library modules
    MBEDTLS_MD_C = BooleanFlag(
        'MBEDTLS_MD_C',
        'Message Digest',
        'Generic message digest wrapper, including HMAC and digest-by-name lookups.',
        FlagCategory.MODULE
    )

    MBEDTLS_ECJPAKE_C = BooleanFlag(
        'MBEDTLS_ECJPAKE_C',
        'EC J-PAKE',
        'Elliptic curve J-PAKE password authenticated key exchange.',
        FlagCategory.MODULE
    )

    MBEDTLS_PEM_PARSE_C = BooleanFlag(
        'MBEDTLS_PEM_PARSE_C',
        'PEM Parsing',
        'Parsing of PEM encoded keys and certificates.',
        FlagCategory.MODULE
    )

    MBEDTLS_ENTROPY_C = BooleanFlag(
        'MBEDTLS_ENTROPY_C',
        'Entropy Accumulator',
        'Platform independent entropy accumulator.',
        FlagCategory.MODULE
    )

    MBEDTLS_PK_C = BooleanFlag(
        'MBEDTLS_PK_C',
        'Public Key Abstraction',
        'Generic public key wrapper over RSA and EC keys.',
        FlagCategory.MODULE
    )

    MBEDTLS_PK_PARSE_C = BooleanFlag(
        'MBEDTLS_PK_PARSE_C',
        'Public Key Parsing',
        'Parsing of DER and PEM encoded public and private keys.',
        FlagCategory.MODULE
    )

    MBEDTLS_PK_WRITE_C = BooleanFlag(
        'MBEDTLS_PK_WRITE_C',
        'Public Key Writing',
        'Writing of public and private keys in DER and PEM format.',
        FlagCategory.MODULE
    )

    MBEDTLS_PKCS12_C = BooleanFlag(
        'MBEDTLS_PKCS12_C',
        'PKCS#12',
        'PKCS#12 password based encryption.',
        FlagCategory.MODULE
    )

    MBEDTLS_RSA_C = BooleanFlag(
        'MBEDTLS_RSA_C',
        'RSA',
        'RSA public key cryptosystem.',
        FlagCategory.MODULE
    )

    MBEDTLS_SSL_TLS_C = BooleanFlag(
        'MBEDTLS_SSL_TLS_C',
        'SSL/TLS',
        'Generic SSL/TLS protocol layer.',
        FlagCategory.MODULE
    )

    MBEDTLS_X509_USE_C = BooleanFlag(
        'MBEDTLS_X509_USE_C',
        'X.509 Core',
        'X.509 core functions used for reading certificates and requests.',
        FlagCategory.MODULE
    )

    MBEDTLS_X509_CREATE_C = BooleanFlag(
        'MBEDTLS_X509_CREATE_C',
        'X.509 Creation',
        'X.509 core functions used for writing certificates and requests.',
        FlagCategory.MODULE
    )

    MBEDTLS_ECP_C = BooleanFlag(
        'MBEDTLS_ECP_C',
        'Elliptic Curves',
        'Elliptic curve arithmetic over GF(p).',
        FlagCategory.MODULE
    )

    MBEDTLS_ECDH_C = BooleanFlag(
        'MBEDTLS_ECDH_C',
        'ECDH',
        'Built-in elliptic curve Diffie-Hellman.',
        FlagCategory.MODULE
    )

    MBEDTLS_ECDSA_C = BooleanFlag(
        'MBEDTLS_ECDSA_C',
        'ECDSA',
        'Built-in elliptic curve DSA.',
        FlagCategory.MODULE
    )

    MBEDTLS_PSA_CRYPTO_C = BooleanFlag(
        'MBEDTLS_PSA_CRYPTO_C',
        'PSA Crypto Core',
        'Platform Security Architecture cryptography API implementation.',
        FlagCategory.MODULE
    )

    # Module features
    MBEDTLS_PK_PARSE_EC_EXTENDED = BooleanFlag(
        'MBEDTLS_PK_PARSE_EC_EXTENDED',
        'Parse Extended EC Keys',
        'Support for parsing EC keys with explicit curve parameters. Only available from the built-in EC implementation.',
        FlagCategory.FEATURE
    )

    MBEDTLS_PK_PARSE_EC_COMPRESSED = BooleanFlag(
        'MBEDTLS_PK_PARSE_EC_COMPRESSED',
        'Parse Compressed EC Points',
        'Support for parsing EC keys stored with compressed points. Only available from the built-in EC implementation.',
        FlagCategory.FEATURE
    )

    MBEDTLS_USE_PSA_CRYPTO = BooleanFlag(
        'MBEDTLS_USE_PSA_CRYPTO',
        'Use PSA Crypto',
        'Route X.509, TLS and PK operations through the PSA crypto API instead of the legacy modules.',
        FlagCategory.FEATURE
    )

    # PSA requirements
    PSA_WANT_ALG_ECDH = BooleanFlag(
        'PSA_WANT_ALG_ECDH',
        'PSA ECDH',
        'Request ECDH support from the PSA crypto API.',
        FlagCategory.PSA
    )

    PSA_WANT_ALG_ECDSA = BooleanFlag(
        'PSA_WANT_ALG_ECDSA',
        'PSA ECDSA',
        'Request ECDSA support from the PSA crypto API.',
        FlagCategory.PSA
    )

    PSA_WANT_KEY_TYPE_ECC_KEY_PAIR_BASIC = BooleanFlag(
        'PSA_WANT_KEY_TYPE_ECC_KEY_PAIR_BASIC',
        'PSA ECC Key Pairs',
        'Request basic ECC key pair support from the PSA crypto API.',
        FlagCategory.PSA
    )

    PSA_WANT_KEY_TYPE_ECC_PUBLIC_KEY = BooleanFlag(
        'PSA_WANT_KEY_TYPE_ECC_PUBLIC_KEY',
        'PSA ECC Public Keys',
        'Request ECC public key support from the PSA crypto API.',
        FlagCategory.PSA
    )

    MBEDTLS_PSA_BUILTIN_KEY_TYPE_ECC_KEY_PAIR_DERIVE = BooleanFlag(
        'MBEDTLS_PSA_BUILTIN_KEY_TYPE_ECC_KEY_PAIR_DERIVE',
        'Built-in ECC Key Derivation',
        'The PSA core derives Weierstrass key pairs with the built-in implementation.',
        FlagCategory.PSA
    )

    # Internal helpers
    MBEDTLS_MD_LIGHT = BooleanFlag(
        'MBEDTLS_MD_LIGHT',
        'Light Message Digest',
        'Subset of the message digest module with hashing only.',
        FlagCategory.INTERNAL
    )

    MBEDTLS_ECP_LIGHT = BooleanFlag(
        'MBEDTLS_ECP_LIGHT',
        'Light Elliptic Curves',
        'Subset of the elliptic curve module without curve arithmetic.',
        FlagCategory.INTERNAL
    )

    MBEDTLS_CAN_ECDH = BooleanFlag(
        'MBEDTLS_CAN_ECDH',
        'ECDH Available',
        'ECDH is available through either the built-in module or PSA.',
        FlagCategory.INTERNAL
    )

    MBEDTLS_PK_CAN_ECDSA_SIGN = BooleanFlag(
        'MBEDTLS_PK_CAN_ECDSA_SIGN',
        'PK Can Sign With ECDSA',
        'The PK layer can produce ECDSA signatures.',
        FlagCategory.INTERNAL
    )

    MBEDTLS_PK_CAN_ECDSA_VERIFY = BooleanFlag(
        'MBEDTLS_PK_CAN_ECDSA_VERIFY',
        'PK Can Verify ECDSA',
        'The PK layer can verify ECDSA signatures.',
        FlagCategory.INTERNAL
    )

    MBEDTLS_PK_CAN_ECDSA_SOME = BooleanFlag(
        'MBEDTLS_PK_CAN_ECDSA_SOME',
        'PK Has Some ECDSA',
        'The PK layer can either sign or verify with ECDSA.',
        FlagCategory.INTERNAL
    )

    MBEDTLS_PSA_CRYPTO_CLIENT = BooleanFlag(
        'MBEDTLS_PSA_CRYPTO_CLIENT',
        'PSA Crypto Client',
        'Client side of the PSA crypto API.',
        FlagCategory.INTERNAL
    )

    MBEDTLS_PK_HAVE_ECC_KEYS = BooleanFlag(
        'MBEDTLS_PK_HAVE_ECC_KEYS',
        'PK Has EC Keys',
        'The PK layer supports EC keys, through either the built-in ECP module or PSA.',
        FlagCategory.INTERNAL
    )
