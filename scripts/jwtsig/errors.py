"""
Errors raised by signing methods, key parsing and the registry.
"""
# Copyright 2020-2026 STMicroelectronics
# SPDX-License-Identifier: Apache-2.0


class JWTSigError(Exception):
    """Base class for every jwtsig error."""
    pass


class KeyParseError(JWTSigError):
    """PEM/DER key material could not be decoded into an EC key."""
    pass


class InvalidKeyError(JWTSigError):
    """Key does not fit the signing method it was given to."""
    pass


class InvalidKeyTypeError(InvalidKeyError):
    """Key is missing or is not an EC key of the expected kind."""
    pass


class WrongCurveError(InvalidKeyError):
    """EC key lives on a curve other than the signing method's."""
    pass


class VerificationError(JWTSigError):
    """Signature did not verify; callers must treat every subclass alike."""
    pass


class SignatureFormatError(VerificationError):
    """Signature bytes do not have the fixed R||S layout."""
    pass


class InvalidSignatureError(VerificationError):
    """Signature is well formed but does not match data and key."""
    pass


class CryptoFailure(JWTSigError):
    """The underlying hash or ECDSA primitive failed."""
    pass


class RegistryFrozenError(JWTSigError):
    pass
