from typing import List, Sequence

BECH32_CONST = 1
CHECKSUM_LENGTH = 6

GENERATOR = [0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3]


def polymod(values: Sequence[int]) -> int:
    """Internal function that computes the Bech32 checksum."""
    chk = 1
    for value in values:
        top = chk >> 25
        chk = (chk & 0x1FFFFFF) << 5 ^ value
        for i in range(5):
            chk ^= GENERATOR[i] if ((top >> i) & 1) else 0
    return chk


def hrp_expand(hrp: str) -> List[int]:
    """Expand the HRP into values for checksum computation."""
    return [ord(x) >> 5 for x in hrp] + [0] + [ord(x) & 31 for x in hrp]


def create_checksum(hrp: str, data: Sequence[int]) -> List[int]:
    """Compute the checksum values given HRP and data."""
    values = hrp_expand(hrp) + list(data)
    chk = polymod(values + [0] * CHECKSUM_LENGTH) ^ BECH32_CONST
    return [
        (chk >> 5 * (CHECKSUM_LENGTH - 1 - i)) & 31 for i in range(CHECKSUM_LENGTH)
    ]


def verify_checksum(hrp: str, data: Sequence[int]) -> bool:
    """Verify a checksum given HRP and data values including the checksum."""
    return polymod(hrp_expand(hrp) + list(data)) == BECH32_CONST
