"""
ECDSA signing methods (ES256, ES384, ES512)
"""
# Copyright 2020-2026 STMicroelectronics
# SPDX-License-Identifier: Apache-2.0
from collections import namedtuple

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric import utils

from ..errors import (
    CryptoFailure, InvalidKeyTypeError, InvalidSignatureError,
    WrongCurveError)
from ..signature import decode_signature, encode_signature, signature_width
from .base import force_bytes


# curve is a cryptography curve instance, hash a cryptography hash class.
ECDSAVariant = namedtuple('ECDSAVariant', ['curve', 'hash', 'curve_bits'])


class SigningMethodECDSA:
    """
    ECDSA signing method bound to one curve and hash.

    Signatures are produced and checked in the fixed width R||S form,
    2 * ceil(curve_bits / 8) bytes long.
    """
    __slots__ = ('_name', '_variant')

    def __init__(self, name, variant):
        self._name = name
        self._variant = variant

    def __repr__(self):
        return "<{} {}>".format(type(self).__name__, self._name)

    def alg(self):
        return self._name

    def variant(self):
        return self._variant

    def key_size(self):
        """Byte width of each of R and S."""
        return (self._variant.curve_bits + 7) // 8

    def sig_len(self):
        return signature_width(self._variant.curve_bits)

    def generate_key(self):
        """Return a new private key on this method's curve."""
        return ec.generate_private_key(self._variant.curve)

    def _check_curve(self, key):
        curve = key.curve
        if curve.name != self._variant.curve.name or \
                curve.key_size != self._variant.curve_bits:
            raise WrongCurveError(
                "{} requires a {} key, got {} ({} bits)"
                .format(self._name, self._variant.curve.name,
                        curve.name, curve.key_size))

    def _algorithm(self):
        return ec.ECDSA(utils.Prehashed(self._variant.hash()))

    def _digest(self, payload):
        digest = hashes.Hash(self._variant.hash())
        digest.update(payload)
        return digest.finalize()

    def sign(self, data, key):
        """Sign `data` and return the R||S signature bytes."""
        if not isinstance(key, ec.EllipticCurvePrivateKey):
            raise InvalidKeyTypeError(
                "{} sign expects an EC private key, got {}"
                .format(self._name, type(key).__name__))
        self._check_curve(key)
        payload = force_bytes(data)
        try:
            der = key.sign(self._digest(payload), self._algorithm())
        except (UnsupportedAlgorithm, ValueError) as e:
            raise CryptoFailure("{} signing failed".format(self._name)) from e
        r, s = utils.decode_dss_signature(der)
        return encode_signature(r, s, self.sig_len())

    def verify(self, data, signature, key):
        """
        Check an R||S `signature` over `data`.

        Returns None when the signature is valid. Raises
        SignatureFormatError when the signature does not have this method's
        width and InvalidSignatureError when it does not match.
        """
        if not isinstance(key, ec.EllipticCurvePublicKey):
            raise InvalidKeyTypeError(
                "{} verify expects an EC public key, got {}"
                .format(self._name, type(key).__name__))
        self._check_curve(key)
        r, s = decode_signature(signature, self.sig_len())
        payload = force_bytes(data)
        try:
            key.verify(utils.encode_dss_signature(r, s),
                       self._digest(payload), self._algorithm())
        except InvalidSignature:
            raise InvalidSignatureError(
                "{} signature is invalid".format(self._name)) from None
        except UnsupportedAlgorithm as e:
            raise CryptoFailure(
                "{} verification failed".format(self._name)) from e


SIGNING_METHOD_ES256 = SigningMethodECDSA(
        'ES256', ECDSAVariant(ec.SECP256R1(), hashes.SHA256, 256))
SIGNING_METHOD_ES384 = SigningMethodECDSA(
        'ES384', ECDSAVariant(ec.SECP384R1(), hashes.SHA384, 384))
SIGNING_METHOD_ES512 = SigningMethodECDSA(
        'ES512', ECDSAVariant(ec.SECP521R1(), hashes.SHA512, 521))

ECDSA_SIGNING_METHODS = (
    SIGNING_METHOD_ES256,
    SIGNING_METHOD_ES384,
    SIGNING_METHOD_ES512,
)
