class Bech32Exception(ValueError):
    """Base class for all encoding and decoding failures."""


class InvalidCharacter(Bech32Exception):
    """Raised when the separator is missing or a character is not in the charset."""


class InvalidChecksum(Bech32Exception):
    pass


class InvalidLength(Bech32Exception):
    """Raised when a string or a bit group sequence has an impossible length."""


class InvalidHRP(Bech32Exception):
    """Raised when the human readable prefix is empty, too long or not printable."""


class InvalidData(Bech32Exception):
    """Raised when a value does not fit its bit width or padding bits are set."""


class KeyException(ValueError):
    pass
