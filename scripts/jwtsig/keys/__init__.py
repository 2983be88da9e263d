# Copyright 2020-2026 STMicroelectronics
# SPDX-License-Identifier: Apache-2.0

"""
Cryptographic key parsing for signing methods.
"""

from ..errors import KeyParseError
from .ecdsa import (
    load_ec_public_pem, load_ec_private_pem, curve_bits, public_pem,
    private_pem)

__all__ = [
    'KeyParseError',
    'load_ec_public_pem',
    'load_ec_private_pem',
    'curve_bits',
    'public_pem',
    'private_pem',
]
