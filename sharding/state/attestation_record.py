from typing import (  # noqa: F401
    Any,
    Dict,
)

from eth_typing import (
    Hash32,
)

from sharding.state.constants import (
    ZERO_HASH32,
)
from sharding.utils.bitfield import (
    Bitfield,
)
from sharding.utils.blake import (
    blake,
)


class AttestationRecord():
    fields = {
        'slot': 'uint64',
        'shard_id': 'uint16',
        'shard_block_hash': 'hash32',
        'attester_bitfield': 'bytes',
        'aggregate_sig': ['uint256'],
    }
    defaults = {
        'slot': 0,
        'shard_id': 0,
        'shard_block_hash': ZERO_HASH32,
        'attester_bitfield': b'',
        'aggregate_sig': [0, 0],
    }  # type: Dict[str, Any]

    def __init__(self, **kwargs):
        for k in self.fields.keys():
            assert k in kwargs or k in self.defaults
            setattr(self, k, kwargs.get(k, self.defaults.get(k)))

    @property
    def bitfield(self) -> Bitfield:
        return Bitfield.from_bytes(self.attester_bitfield)

    @property
    def num_votes(self) -> int:
        return self.bitfield.calc_votes()

    @property
    def num_aggregate_sig(self) -> int:
        return len(self.aggregate_sig)

    @property
    def hash(self) -> Hash32:
        return blake(
            self.slot.to_bytes(8, byteorder='big') +
            self.shard_id.to_bytes(2, byteorder='big') +
            self.shard_block_hash +
            len(self.attester_bitfield).to_bytes(4, byteorder='big') +
            self.attester_bitfield +
            b''.join(sig.to_bytes(32, byteorder='big') for sig in self.aggregate_sig)
        )
