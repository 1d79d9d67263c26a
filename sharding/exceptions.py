from eth_utils import (
    ValidationError,
)


class BitfieldError(ValidationError):
    pass


class IndexOutOfRange(BitfieldError, IndexError):
    """
    Raised when a bit index falls outside ``[0, size)`` of a bitfield.
    """
    pass


class BitfieldLengthMismatch(BitfieldError):
    """
    Raised when bitfields of different sizes are aggregated together.
    """
    pass
