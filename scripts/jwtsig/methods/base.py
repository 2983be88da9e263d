# Copyright 2020-2026 STMicroelectronics
# SPDX-License-Identifier: Apache-2.0

"""
The capability every signing method offers.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SigningMethod(Protocol):
    """Protocol for a named algorithm producing detached signatures"""

    def alg(self) -> str:
        """Algorithm name as carried in a token's "alg" header"""
        ...

    def sign(self, data, key) -> bytes:
        """Return the signature of `data` made with `key`"""
        ...

    def verify(self, data, signature, key) -> None:
        """Return normally if `signature` is valid, raise otherwise"""
        ...


def force_bytes(data):
    """Signing inputs are usually the ASCII "header.payload" string."""
    if isinstance(data, str):
        return data.encode('utf-8')
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError("Expected bytes or str, got {}"
                    .format(type(data).__name__))
