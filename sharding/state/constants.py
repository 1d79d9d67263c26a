from eth_typing import (
    Hash32,
)


ZERO_HASH32 = Hash32(32 * b'\x00')
