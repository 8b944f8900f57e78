from . import util
from .keygen import KeyPair, ProposedCommitment
from .vss import Share
from .zkp import SchnorrProof

SHARE_LENGTH = 96
PROPOSED_COMMITMENT_HEADER_LENGTH = 128


def share_to_bytes(share: Share) -> bytes:
    return (
        util.index_to_bytes(share.dealer_index) +
        util.index_to_bytes(share.receiver_index) +
        util.private_value_to_bytes(share.value)
    )


def bytes_to_share(bts: bytes) -> Share:
    if len(bts) != SHARE_LENGTH:
        raise ValueError('unexpected length {} bytes'.format(len(bts)))
    return Share(
        dealer_index=util.bytes_to_index(bts[0:32]),
        receiver_index=util.bytes_to_index(bts[32:64]),
        value=util.bytes_to_private_value(bts[64:96]),
    )


def proposed_commitment_to_bytes(proposed: ProposedCommitment) -> bytes:
    return (
        util.index_to_bytes(proposed.index) +
        util.curve_point_to_bytes(proposed.proof.r) +
        util.private_value_to_bytes(proposed.proof.z) +
        util.curve_point_tuple_to_bytes(proposed.commitment)
    )


def bytes_to_proposed_commitment(bts: bytes) -> ProposedCommitment:
    if len(bts) < PROPOSED_COMMITMENT_HEADER_LENGTH + 64:
        raise ValueError('unexpected length {} bytes'.format(len(bts)))
    return ProposedCommitment(
        index=util.bytes_to_index(bts[0:32]),
        commitment=util.bytes_to_curve_point_tuple(bts[PROPOSED_COMMITMENT_HEADER_LENGTH:]),
        proof=SchnorrProof(
            r=util.bytes_to_curve_point(bts[32:96]),
            z=util.bytes_to_private_value(bts[96:128]),
        ),
    )


def proposed_commitment_to_message(proposed: ProposedCommitment) -> dict:
    return {
        'index': proposed.index,
        'commitment': tuple(util.curve_point_to_hex(pt) for pt in proposed.commitment),
        'proof': {
            'r': util.curve_point_to_hex(proposed.proof.r),
            'z': '{:064x}'.format(proposed.proof.z),
        },
    }


def message_to_proposed_commitment(msg: dict) -> ProposedCommitment:
    try:
        index = msg['index']
        commitment = tuple(util.hex_to_curve_point(pt) for pt in msg['commitment'])
        r = util.hex_to_curve_point(msg['proof']['r'])
        z = int(msg['proof']['z'], 16)
    except (KeyError, TypeError) as e:
        raise ValueError('malformed proposed commitment message: {!r}'.format(e)) from e

    util.validate_index(index)
    util.validate_private_value(z)
    if not commitment:
        raise ValueError('proposed commitment message has no commitment points')

    return ProposedCommitment(index=index, commitment=commitment, proof=SchnorrProof(r=r, z=z))


def key_pair_to_message(key_pair: KeyPair) -> dict:
    return {
        'index': key_pair.index,
        'public': util.curve_point_to_hex(key_pair.public),
        'group_public': util.curve_point_to_hex(key_pair.group_public),
    }
