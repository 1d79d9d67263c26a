from typing import (
    Iterable,
    Optional,
    Sequence,
    Tuple,
)

from eth_utils import (
    ValidationError,
    to_tuple,
)

from sharding.exceptions import (
    BitfieldLengthMismatch,
    IndexOutOfRange,
)


def _validate_index(bitfield: bytes, index: int) -> None:
    if not 0 <= index < len(bitfield) * 8:
        raise IndexOutOfRange(
            "Bit index out of range. Found: %s, Expected: 0 <= index < %s" %
            (index, len(bitfield) * 8)
        )


def has_voted(bitfield: bytes, index: int) -> bool:
    _validate_index(bitfield, index)
    return bool(bitfield[index // 8] & (1 << (index % 8)))


def set_voted(bitfield: bytes, index: int) -> bytes:
    _validate_index(bitfield, index)
    byte_index = index // 8
    bit_index = index % 8
    new_byte_value = bitfield[byte_index] | (1 << bit_index)
    return bitfield[:byte_index] + bytes([new_byte_value]) + bitfield[byte_index + 1:]


def get_bitfield_length(bit_count: int) -> int:
    """Return the length of the bitfield for a given number of attesters in bytes."""
    if bit_count < 0:
        raise ValidationError("Attester count must be non-negative. Found: %s" % bit_count)
    return 0 if bit_count == 0 else (bit_count - 1) // 8 + 1


def get_empty_bitfield(bit_count: int) -> bytes:
    return b"\x00" * get_bitfield_length(bit_count)


def get_vote_count(bitfield: bytes) -> int:
    return sum(bin(byte).count('1') for byte in bitfield)


@to_tuple
def get_voter_indices(bitfield: bytes) -> Iterable[int]:
    for index in range(len(bitfield) * 8):
        if has_voted(bitfield, index):
            yield index


def or_bitfields(bitfields: Sequence[bytes]) -> bytes:
    bitfield_length = len(bitfields[0])
    for bitfield in bitfields:
        if len(bitfield) != bitfield_length:
            raise BitfieldLengthMismatch(
                "The bitfield sizes are different. Found: %s, Expected: %s" %
                (len(bitfield) * 8, bitfield_length * 8)
            )

    new = b''
    for i in range(bitfield_length):
        byte = 0
        for bitfield in bitfields:
            byte = bitfield[i] | byte
        new += bytes([byte])
    return new


class Bitfield():
    """
    Bit array where every bit represents the vote of the attester with the
    corresponding index.

    Bit ``i`` lives in byte ``i // 8`` at position ``i % 8``, least significant
    bit first. The size is always a whole number of bytes.

    Methods that set bits return a new ``Bitfield``; an instance never changes
    after construction.
    """
    __slots__ = ('_data',)

    def __new__(cls, data: bytes=b'') -> 'Bitfield':
        # memoryview rejects ints, which bytes() would treat as a length
        self = super().__new__(cls)
        object.__setattr__(self, '_data', memoryview(data).tobytes())
        return self

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Bitfield is immutable")

    def __reduce__(self):
        return (type(self), (self._data,))

    @classmethod
    def create_empty(cls, participant_count: int) -> 'Bitfield':
        """
        Create a bitfield with no votes, large enough for ``participant_count``
        attesters. The capacity is rounded up to the next whole byte.
        """
        return cls(get_empty_bitfield(participant_count))

    @classmethod
    def from_bytes(cls, data: bytes) -> 'Bitfield':
        return cls(data)

    @classmethod
    def or_bitfield(cls, bitfields: Sequence['Bitfield']) -> Optional['Bitfield']:
        """
        OR-aggregate ``bitfields`` into a single bitfield.

        Returns ``None`` when ``bitfields`` is empty. All inputs must share the
        size of the first one, otherwise ``BitfieldLengthMismatch`` is raised.
        """
        bitfields = tuple(bitfields)
        if not bitfields:
            return None
        return cls(or_bitfields([bitfield._data for bitfield in bitfields]))

    def mark_vote(self, index: int) -> 'Bitfield':
        return type(self)(set_voted(self._data, index))

    def has_voted(self, index: int) -> bool:
        return has_voted(self._data, index)

    def calc_votes(self) -> int:
        return get_vote_count(self._data)

    def voter_indices(self) -> Tuple[int, ...]:
        return get_voter_indices(self._data)

    def has_trailing_votes(self, participant_count: int) -> bool:
        """
        Whether any padding bit at or past ``participant_count`` is set.
        """
        return any(
            has_voted(self._data, index)
            for index in range(max(participant_count, 0), self.size())
        )

    def size(self) -> int:
        return len(self._data) * 8

    def get_data(self) -> bytes:
        return self._data

    def clone(self) -> 'Bitfield':
        return type(self)(self._data)

    def __len__(self) -> int:
        return self.size()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitfield):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return '<Bitfield size=%d votes=%d data=0x%s>' % (
            self.size(),
            self.calc_votes(),
            self._data.hex(),
        )
