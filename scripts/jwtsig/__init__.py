# Copyright 2020-2026 STMicroelectronics
# SPDX-License-Identifier: Apache-2.0

"""
Signing methods for JWT-style tokens.

Usage:
    from jwtsig import get_signing_method, load_ec_private_pem

    method = get_signing_method("ES256")
    key = load_ec_private_pem(pem_bytes)
    sig = method.sign("header.payload", key)
    method.verify("header.payload", sig, key.public_key())
"""

import logging

from .errors import (
    JWTSigError, KeyParseError, InvalidKeyError, InvalidKeyTypeError,
    WrongCurveError, VerificationError, SignatureFormatError,
    InvalidSignatureError, CryptoFailure, RegistryFrozenError)
from .keys import load_ec_public_pem, load_ec_private_pem
from .methods import (
    SigningMethod, SigningMethodECDSA, SIGNING_METHOD_ES256,
    SIGNING_METHOD_ES384, SIGNING_METHOD_ES512)
from .registry import (
    Registry, default_registry, register_signing_method, get_signing_method,
    get_algorithms)
from .signature import encode_signature, decode_signature

jwtsig_version = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'JWTSigError',
    'KeyParseError',
    'InvalidKeyError',
    'InvalidKeyTypeError',
    'WrongCurveError',
    'VerificationError',
    'SignatureFormatError',
    'InvalidSignatureError',
    'CryptoFailure',
    'RegistryFrozenError',
    'load_ec_public_pem',
    'load_ec_private_pem',
    'SigningMethod',
    'SigningMethodECDSA',
    'SIGNING_METHOD_ES256',
    'SIGNING_METHOD_ES384',
    'SIGNING_METHOD_ES512',
    'Registry',
    'default_registry',
    'register_signing_method',
    'get_signing_method',
    'get_algorithms',
    'encode_signature',
    'decode_signature',
    'jwtsig_version',
]
