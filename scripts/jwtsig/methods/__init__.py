# Copyright 2020-2026 STMicroelectronics
# SPDX-License-Identifier: Apache-2.0

"""
Signing method implementations.
"""

from .base import SigningMethod
from .ecdsa import (
    ECDSAVariant, SigningMethodECDSA, SIGNING_METHOD_ES256,
    SIGNING_METHOD_ES384, SIGNING_METHOD_ES512, ECDSA_SIGNING_METHODS)

__all__ = [
    'SigningMethod',
    'ECDSAVariant',
    'SigningMethodECDSA',
    'SIGNING_METHOD_ES256',
    'SIGNING_METHOD_ES384',
    'SIGNING_METHOD_ES512',
    'ECDSA_SIGNING_METHODS',
]
