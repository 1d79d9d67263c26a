import logging
from typing import (
    Any,
    Dict,
    Iterable,
    Optional,
    Sequence,
    TYPE_CHECKING,
)

from eth_utils import (
    ValidationError,
    to_tuple,
)

from sharding.sharding_typing.custom import (
    ValidatorIndex,
)
from sharding.utils.bitfield import (
    Bitfield,
    get_bitfield_length,
)

from .config import (
    DEFAULT_CONFIG,
)

if TYPE_CHECKING:
    from .attestation_record import AttestationRecord  # noqa: F401


logger = logging.getLogger(__name__)


def validate_attester_bitfield(attestation: 'AttestationRecord',
                               committee_size: int,
                               config: Dict[str, Any]=DEFAULT_CONFIG) -> None:
    max_validator_count = config['max_validator_count']
    if committee_size > max_validator_count:
        raise ValidationError(
            "Committee is larger than the validator set. Found: %s, Expected: <= %s" %
            (committee_size, max_validator_count)
        )

    if len(attestation.attester_bitfield) != get_bitfield_length(committee_size):
        raise ValidationError(
            "Attestation has incorrect bitfield length. Found: %s, Expected: %s" %
            (len(attestation.attester_bitfield), get_bitfield_length(committee_size))
        )

    # check if end bits are zero
    if attestation.bitfield.has_trailing_votes(committee_size):
        raise ValidationError("Attestation has non-zero trailing bits")


def aggregate_attester_bitfields(
        attestations: Sequence['AttestationRecord']) -> Optional[Bitfield]:
    bitfields = [attestation.bitfield for attestation in attestations]
    aggregated = Bitfield.or_bitfield(bitfields)
    if aggregated is None:
        logger.debug("No attestations to aggregate")
    else:
        logger.debug(
            "Aggregated %d attester bitfields into %d votes",
            len(bitfields),
            aggregated.calc_votes(),
        )
    return aggregated


@to_tuple
def get_voters(bitfield: Bitfield,
               committee: Sequence[ValidatorIndex]) -> Iterable[ValidatorIndex]:
    for i, index in enumerate(committee):
        if bitfield.has_voted(i):
            yield index
