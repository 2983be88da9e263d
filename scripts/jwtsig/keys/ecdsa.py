"""
ECDSA key management
"""
# Copyright 2020-2026 STMicroelectronics
# SPDX-License-Identifier: Apache-2.0
from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from ..errors import KeyParseError


def _to_bytes(pem):
    if isinstance(pem, str):
        return pem.encode('utf-8')
    if isinstance(pem, (bytes, bytearray, memoryview)):
        return bytes(pem)
    raise KeyParseError("Key must be PEM encoded bytes or str, got {}"
                        .format(type(pem).__name__))


def load_ec_public_pem(pem):
    """
    Parse a PEM encoded EC public key.

    Both a bare "PUBLIC KEY" block and a "CERTIFICATE" block are accepted;
    for a certificate the subject public key is returned.
    """
    data = _to_bytes(pem)
    try:
        key = serialization.load_pem_public_key(data)
    except (ValueError, UnsupportedAlgorithm) as key_err:
        try:
            key = x509.load_pem_x509_certificate(data).public_key()
        except (ValueError, UnsupportedAlgorithm):
            raise KeyParseError(
                "Key must be a PEM encoded PKIX public key or certificate"
            ) from key_err
    if not isinstance(key, ec.EllipticCurvePublicKey):
        raise KeyParseError("Key is not a valid ECDSA public key")
    return key


def load_ec_private_pem(pem):
    """
    Parse a PEM encoded EC private key, either "EC PRIVATE KEY" (SEC1)
    or "PRIVATE KEY" (PKCS#8). Encrypted keys are refused.
    """
    data = _to_bytes(pem)
    try:
        key = serialization.load_pem_private_key(data, password=None)
    except TypeError as e:
        # Raised by cryptography when the PEM block is encrypted.
        raise KeyParseError("Encrypted private keys are not supported") from e
    except (ValueError, UnsupportedAlgorithm) as e:
        raise KeyParseError(
            "Key must be a PEM encoded SEC1 or PKCS#8 private key") from e
    if not isinstance(key, ec.EllipticCurvePrivateKey):
        raise KeyParseError("Key is not a valid ECDSA private key")
    return key


def curve_bits(key):
    """Field bit-length of the curve an EC key lives on."""
    return key.curve.key_size


def public_pem(key):
    """Serialize an EC public key as a SubjectPublicKeyInfo PEM block."""
    if isinstance(key, ec.EllipticCurvePrivateKey):
        key = key.public_key()
    return key.public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo)


def private_pem(key):
    """Serialize an EC private key as an unencrypted PKCS#8 PEM block."""
    return key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption())
