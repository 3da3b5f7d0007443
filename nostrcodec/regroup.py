from typing import Iterable, List

from .exception import InvalidData, InvalidLength


def convertbits(
    data: Iterable[int], frombits: int, tobits: int, pad: bool = True
) -> List[int]:
    """General power-of-2 base conversion.

    The low ``frombits`` bits of every value are concatenated into a single
    big-endian bit stream which is cut again into groups of ``tobits`` bits.

    :param data: values of ``frombits`` bits each, e.g. bytes
    :param frombits: width of the input groups
    :param tobits: width of the output groups
    :param pad: zero-fill a trailing partial group. When False the remaining
        bits must be a valid padding, otherwise an exception is raised.
    :rtype: list
    """
    acc = 0
    bits = 0
    ret = []
    maxv = (1 << tobits) - 1
    max_acc = (1 << (frombits + tobits - 1)) - 1
    for value in data:
        if value < 0 or (value >> frombits):
            raise InvalidData(f"value {value} does not fit into {frombits} bits")
        acc = ((acc << frombits) | value) & max_acc
        bits += frombits
        while bits >= tobits:
            bits -= tobits
            ret.append((acc >> bits) & maxv)
    if pad:
        if bits:
            ret.append((acc << (tobits - bits)) & maxv)
    elif bits >= frombits:
        raise InvalidLength(f"{bits} excess bits left after conversion")
    elif (acc << (tobits - bits)) & maxv:
        raise InvalidData("non-zero padding bits")
    return ret
