"""
Fixed width ECDSA signature encoding.

Token signatures carry ECDSA signatures as the raw concatenation of R and S,
each a big-endian unsigned integer zero padded to the curve's byte size.
This is not the ASN.1 DER form produced by most ECDSA libraries.
"""
# Copyright 2020-2026 STMicroelectronics
# SPDX-License-Identifier: Apache-2.0

from .errors import SignatureFormatError


def signature_width(curve_bits):
    """Return the R||S width in bytes for a curve of `curve_bits` bits."""
    return 2 * ((curve_bits + 7) // 8)


def _check_width(width):
    if width <= 0 or width % 2 != 0:
        raise SignatureFormatError(
            "Signature width must be a positive even number, got {}"
            .format(width))


def encode_signature(r, s, width):
    """Pack R and S into exactly `width` bytes.

    Raises SignatureFormatError if either integer is negative or does not
    fit in `width // 2` bytes; the value is never truncated.
    """
    _check_width(width)
    half = width // 2
    try:
        return r.to_bytes(half, byteorder='big') + \
            s.to_bytes(half, byteorder='big')
    except OverflowError as e:
        raise SignatureFormatError(
            "R and S must be unsigned and fit in {} bytes".format(half)) from e


def decode_signature(sig, width):
    """Split a `width` byte signature into its (R, S) integers."""
    _check_width(width)
    if not isinstance(sig, (bytes, bytearray, memoryview)):
        raise SignatureFormatError("Signature must be bytes, got {}"
                                   .format(type(sig).__name__))
    if len(sig) != width:
        raise SignatureFormatError(
            "Signature is {} bytes, expected {}".format(len(sig), width))
    half = width // 2
    r = int.from_bytes(sig[:half], byteorder='big')
    s = int.from_bytes(sig[half:], byteorder='big')
    return r, s
