import pytest

from sharding.utils.bitfield import (
    Bitfield,
)


@pytest.fixture
def empty_bitfield():
    return Bitfield.create_empty(16)


@pytest.fixture
def sample_attestation_record_params():
    return {
        'slot': 10,
        'shard_id': 12,
        'shard_block_hash': b'\x20'*32,
        'attester_bitfield': b'\x33\x1F',
        'aggregate_sig': [0, 0],
    }
