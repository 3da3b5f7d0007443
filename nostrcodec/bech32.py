"""Bech32 encoding of raw bytes, as used for nsec/npub keys (NIP-19)."""
import logging
from dataclasses import dataclass
from typing import Optional

from .checksum import CHECKSUM_LENGTH, create_checksum, verify_checksum
from .exception import InvalidCharacter, InvalidChecksum, InvalidHRP, InvalidLength
from .regroup import convertbits

log = logging.getLogger(__name__)

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
CHARSET_REV = {c: i for i, c in enumerate(CHARSET)}
SEPARATOR = "1"
MAX_HRP_LENGTH = 83
MAX_LENGTH = 90


@dataclass(frozen=True)
class Bech32Result:
    """Decoded bech32 string.

    :param hrp: human readable prefix, lower case
    :param data: decoded payload
    """

    hrp: str
    data: bytes

    def __iter__(self):
        return iter((self.hrp, self.data))


def check_hrp(hrp: str) -> None:
    if len(hrp) < 1 or len(hrp) > MAX_HRP_LENGTH:
        raise InvalidHRP(f"prefix must have 1 to {MAX_HRP_LENGTH} characters")
    for x in hrp:
        if ord(x) < 33 or ord(x) > 126:
            raise InvalidHRP(f"invalid prefix character {x!r}")


def encode(hrp: str, data: bytes, max_length: Optional[int] = MAX_LENGTH) -> str:
    """Compute a bech32 string given a prefix and raw bytes.

    :param hrp: human readable prefix, e.g. npub
    :param data: payload bytes
    :param max_length: maximal length of the result, None disables the check
    :rtype: str
    """
    check_hrp(hrp)
    hrp = hrp.lower()
    values = convertbits(data, 8, 5)
    combined = values + create_checksum(hrp, values)
    length = len(hrp) + 1 + len(combined)
    if max_length is not None and length > max_length:
        raise InvalidLength(f"encoded length {length} exceeds {max_length}")
    return hrp + SEPARATOR + ''.join([CHARSET[d] for d in combined])


def decode(
    bech: str, max_length: Optional[int] = MAX_LENGTH, strict: bool = False
) -> Bech32Result:
    """Validate a bech32 string and determine prefix and payload.

    The input is case-folded before decoding, so mixed case strings are
    accepted unless ``strict`` is set.

    :param bech: bech32 string
    :param max_length: maximal accepted length, None disables the check
    :param strict: reject strings mixing upper and lower case
    :rtype: Bech32Result
    """
    if max_length is not None and len(bech) > max_length:
        log.debug("Rejected %d characters long input", len(bech))
        raise InvalidLength(f"string length {len(bech)} exceeds {max_length}")
    if strict and bech.lower() != bech and bech.upper() != bech:
        raise InvalidCharacter("mixed case string")
    pos = bech.rfind(SEPARATOR)
    if pos < 0:
        raise InvalidCharacter(f"separator '{SEPARATOR}' not found")
    # range checks run before case folding, non-ASCII may fold to ASCII
    check_hrp(bech[:pos])
    for x in bech[pos + 1 :]:
        if ord(x) < 33 or ord(x) > 126:
            raise InvalidCharacter(f"invalid data character {x!r}")
    bech = bech.lower()
    hrp = bech[:pos]

    values = []
    for x in bech[pos + 1 :]:
        if x not in CHARSET_REV:
            raise InvalidCharacter(f"invalid data character {x!r}")
        values.append(CHARSET_REV[x])
    if len(values) < CHECKSUM_LENGTH:
        raise InvalidLength(f"{len(values)} data characters, checksum needs 6")
    if not verify_checksum(hrp, values):
        log.debug("Checksum verification failed for %s", bech)
        raise InvalidChecksum(f"checksum verification failed for {hrp}")

    data = convertbits(values[:-CHECKSUM_LENGTH], 5, 8, False)
    return Bech32Result(hrp, bytes(data))


def bech32_encode(raw_bytes: bytes, prefix: str) -> str:
    return encode(prefix, raw_bytes, max_length=None)


def bech32_decode(bech32_str: str, prefix: Optional[str] = None) -> bytes:
    """Loads bytes from its bech32 form, e.g. an npub or nsec.

    :param bech32_str: bech32 string
    :param prefix: expected prefix, checked when given
    """
    hrp, data = decode(bech32_str, max_length=None)
    if prefix is not None and hrp != prefix:
        raise InvalidHRP(f"expected prefix {prefix}, got {hrp}")
    return data
