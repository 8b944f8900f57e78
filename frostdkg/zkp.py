"""
Schnorr proofs of knowledge of a dealer's secret, made non-interactive with a
Fiat-Shamir challenge.

The challenge hashes a fixed-width encoding of

    nonce commitment R | dealer public key | dealer index | context

where every field is rendered as hex and left padded with zeros to its width.
Every participant must reproduce this layout exactly, so an input whose hex
rendering does not fit its field is an error rather than a longer encoding.
"""
import collections
import logging

from py_ecc.secp256k1 import secp256k1

from . import util
from .errors import ChallengeDerivationError, ZKPVerificationError

# field widths in bytes
COMMITMENT_POINT_WIDTH = 64
PUBLIC_POINT_WIDTH = 64
INDEX_WIDTH = 10
CONTEXT_WIDTH = 32
CHALLENGE_INPUT_WIDTH = COMMITMENT_POINT_WIDTH + PUBLIC_POINT_WIDTH + INDEX_WIDTH + CONTEXT_WIDTH

SchnorrProof = collections.namedtuple('SchnorrProof', ('r', 'z'))


def _pad_hex_field(name: str, hexstr: str, width: int) -> str:
    if len(hexstr) > 2 * width:
        raise ChallengeDerivationError(
            '{} needs {} hex digits but field is {} bytes wide'.format(name, len(hexstr), width))
    return hexstr.rjust(2 * width, '0')


def _index_to_hex(index: int) -> str:
    if not isinstance(index, int) or isinstance(index, bool) or index < 0:
        raise ValueError('invalid dealer index {!r}'.format(index))
    return '{:x}'.format(index)


def _context_to_hex(context: str) -> str:
    if not isinstance(context, str):
        raise ValueError('context must be a string but got {!r}'.format(context))
    return context.encode('utf-8').hex()


def digest_to_scalar(digest: bytes) -> int:
    # NOTE: the digest is read as a base field element and that element is
    #       then reinterpreted as a scalar. Both reductions are kept because
    #       every participant has to agree on the result; the bias this adds
    #       over a plain hash-to-scalar still wants a cryptographic review.
    field_element = int.from_bytes(digest, byteorder='big') % secp256k1.P
    return field_element % secp256k1.N


def encode_challenge_input(dealer_index: int, context: str, public_point: (int, int),
                           commitment_point: (int, int)) -> bytes:
    try:
        fields = (
            ('commitment point', util.curve_point_to_hex(commitment_point), COMMITMENT_POINT_WIDTH),
            ('public point', util.curve_point_to_hex(public_point), PUBLIC_POINT_WIDTH),
            ('dealer index', _index_to_hex(dealer_index), INDEX_WIDTH),
            ('context', _context_to_hex(context), CONTEXT_WIDTH),
        )
    except (TypeError, ValueError) as e:
        raise ChallengeDerivationError('could not serialize challenge input: {}'.format(e)) from e

    encoded = bytes.fromhex(''.join(_pad_hex_field(name, hexstr, width) for name, hexstr, width in fields))

    if len(encoded) != CHALLENGE_INPUT_WIDTH:
        raise ChallengeDerivationError('challenge input has unexpected length {} bytes'.format(len(encoded)))

    return encoded


def derive_challenge(dealer_index: int, context: str, public_point: (int, int),
                     commitment_point: (int, int)) -> int:
    encoded = encode_challenge_input(dealer_index, context, public_point, commitment_point)
    return digest_to_scalar(util.sha3_256(encoded))


def prove_knowledge(secret: int, challenge: int, nonce: int) -> SchnorrProof:
    # nonce must be fresh for every proof; reusing one across two challenges leaks the secret
    util.validate_private_value(secret)
    util.validate_private_value(nonce)
    return SchnorrProof(
        r=util.public_point(nonce),
        z=(nonce + secret * challenge) % secp256k1.N,
    )


def verify_knowledge(challenge: int, proposed_commitment: 'ProposedCommitment'):
    proof = proposed_commitment.proof

    try:
        util.validate_private_value(proof.z)
    except ValueError as e:
        raise ZKPVerificationError(proposed_commitment.index) from e

    expected_r = util.subtract_curve_points(
        util.public_point(proof.z),
        secp256k1.multiply(proposed_commitment.secret_commitment, challenge))

    if expected_r != tuple(proof.r):
        logging.debug('proof from dealer {} does not satisfy the Schnorr equation'.format(proposed_commitment.index))
        raise ZKPVerificationError(proposed_commitment.index)
