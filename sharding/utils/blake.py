from hashlib import blake2b

from eth_typing import (
    Hash32,
)


def blake(x: bytes) -> Hash32:
    return Hash32(blake2b(x).digest()[:32])
