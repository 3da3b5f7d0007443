import binascii
import secrets
from typing import Optional

import coincurve as secp256k1

from .bech32 import bech32_decode, bech32_encode
from .exception import Bech32Exception, KeyException

KEY_LENGTH = 32


def _decode_key(bech32_str: str, prefix: str) -> bytes:
    try:
        raw_bytes = bech32_decode(bech32_str, prefix)
    except Bech32Exception as err:
        raise KeyException(f"invalid {prefix}: {err}") from err
    if len(raw_bytes) != KEY_LENGTH:
        raise KeyException(f"{prefix} must contain {KEY_LENGTH} bytes")
    return raw_bytes


def _unhexlify(hex: str) -> bytes:
    try:
        return binascii.unhexlify(hex)
    except (binascii.Error, ValueError) as err:
        raise KeyException(f"invalid hex string: {err}") from err


class PublicKey:
    def __init__(self, raw_bytes: bytes) -> None:
        """
        :param raw_bytes: The x-only public key, in raw or hex form.
        :type raw_bytes: bytes
        """
        if isinstance(raw_bytes, PrivateKey):
            self.raw_bytes = raw_bytes.public_key.raw_bytes
        elif isinstance(raw_bytes, secp256k1.PublicKeyXOnly):
            self.raw_bytes = raw_bytes.format()
        elif isinstance(raw_bytes, str):
            self.raw_bytes = _unhexlify(raw_bytes)
        elif isinstance(raw_bytes, (bytes, bytearray, memoryview)):
            self.raw_bytes = bytes(raw_bytes)
        else:
            raise KeyException(
                f"unsupported public key type {type(raw_bytes).__name__}"
            )
        if len(self.raw_bytes) != KEY_LENGTH:
            raise KeyException(f"public key must contain {KEY_LENGTH} bytes")

    def bech32(self) -> str:
        return bech32_encode(self.raw_bytes, "npub")

    @property
    def npub(self):
        return self.bech32()

    def hex(self) -> str:
        return self.raw_bytes.hex()

    def verify(self, sig: bytes, message: bytes) -> bool:
        pk = secp256k1.PublicKeyXOnly(self.raw_bytes)
        return pk.verify(sig, message)

    @classmethod
    def from_hex(cls, hex: str) -> 'PublicKey':
        return cls(_unhexlify(hex))

    @classmethod
    def from_npub(cls, npub: str) -> 'PublicKey':
        """Load a PublicKey from its bech32/npub form."""
        return cls(_decode_key(npub, "npub"))

    def __repr__(self):
        pubkey = self.bech32()
        return f'PublicKey({pubkey[:10]}...{pubkey[-10:]})'

    def __eq__(self, other):
        return isinstance(other, PublicKey) and self.raw_bytes == other.raw_bytes

    def __hash__(self):
        return hash(self.raw_bytes)

    def __str__(self):
        """Return public key in hex form
        :return: string
        :rtype: str
        """
        return self.hex()

    def __bytes__(self):
        return self.raw_bytes


class PrivateKey:
    def __init__(self, raw_secret: Optional[bytes] = None) -> None:
        """
        :param raw_secret: The secret used to initialize the private key.
                           If not provided or `None`, a new key will be generated.
        :type raw_secret: bytes
        """
        if raw_secret is None:
            self.raw_secret = secrets.token_bytes(KEY_LENGTH)
        elif isinstance(raw_secret, (bytes, bytearray, memoryview)):
            self.raw_secret = bytes(raw_secret)
        else:
            raise KeyException(
                f"unsupported secret type {type(raw_secret).__name__}"
            )
        if len(self.raw_secret) != KEY_LENGTH:
            raise KeyException(f"private key must contain {KEY_LENGTH} bytes")

        try:
            sk = secp256k1.PrivateKey(self.raw_secret)
        except ValueError as err:
            raise KeyException(f"invalid secret: {err}") from err
        self.public_key = PublicKey(sk.public_key_xonly)

    @classmethod
    def from_nsec(cls, nsec: str) -> 'PrivateKey':
        """Load a PrivateKey from its bech32/nsec form.

        :param nsec: the nsec key to be imported
        """
        return cls(_decode_key(nsec, "nsec"))

    @classmethod
    def from_hex(cls, hex: str) -> 'PrivateKey':
        """Load a PrivateKey from its hex form."""
        return cls(_unhexlify(hex))

    def bech32(self) -> str:
        return bech32_encode(self.raw_secret, "nsec")

    @property
    def nsec(self):
        return self.bech32()

    def __hash__(self):
        return hash(self.raw_secret)

    def __eq__(self, other):
        return isinstance(other, PrivateKey) and self.raw_secret == other.raw_secret

    def hex(self) -> str:
        return self.raw_secret.hex()

    def sign(self, message: bytes, aux_randomness: bytes = b'') -> bytes:
        """Schnorr signature of a 32 byte message hash."""
        if len(message) != 32:
            raise KeyException("message must be a 32 byte hash")
        sk = secp256k1.PrivateKey(self.raw_secret)
        return sk.sign_schnorr(message, aux_randomness)

    def __repr__(self):
        pubkey = self.public_key.bech32()
        return f'PrivateKey({pubkey[:10]}...{pubkey[-10:]})'

    def __str__(self):
        """Return private key in hex form
        :return: hex string
        :rtype: str
        """
        return self.hex()

    def __bytes__(self):
        return self.raw_secret
