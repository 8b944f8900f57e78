import collections
import enum
import functools
import logging

from py_ecc.secp256k1 import secp256k1

from . import util, vss, zkp
from .errors import (
    ChallengeDerivationError,
    DuplicateDealerError,
    InvalidShareCountError,
    MissingCommitmentError,
    PhaseError,
    ShareReceiverMismatchError,
    ZKPVerificationError,
)

DEFAULT_CONTEXT = 'frostdkg'


class ProposedCommitment(collections.namedtuple('ProposedCommitment', ('index', 'commitment', 'proof'))):
    __slots__ = ()

    @property
    def secret_commitment(self) -> (int, int):
        return self.commitment[0]


_validation_token = object()


class ValidatedCommitment(collections.namedtuple('ValidatedCommitment', ('index', 'commitment'))):
    __slots__ = ()

    def __new__(cls, index: int, commitment: tuple, *, _token=None):
        if _token is not _validation_token:
            raise TypeError('ValidatedCommitment can only be produced by validating a proposed commitment')
        return super().__new__(cls, index, commitment)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    @property
    def secret_commitment(self) -> (int, int):
        return self.commitment[0]


KeyPair = collections.namedtuple('KeyPair', ('index', 'secret', 'public', 'group_public'))


@enum.unique
class DKGPhase(enum.IntEnum):
    idle = 0
    began = 1
    peers_validated = 2
    finalized = 3


def keygen_begin(num_shares: int, threshold: int, dealer_index: int, context: str) -> (ProposedCommitment, tuple):
    secret = util.random_private_value()
    commitment, shares = vss.generate_shares(secret, num_shares, threshold, dealer_index)

    nonce = util.random_private_value()
    challenge = zkp.derive_challenge(dealer_index, context, commitment[0], util.public_point(nonce))
    proof = zkp.prove_knowledge(secret, challenge, nonce)

    return ProposedCommitment(index=dealer_index, commitment=commitment, proof=proof), shares


def _validate_commitment_points(proposed: ProposedCommitment):
    try:
        if len(proposed.commitment) < 1:
            raise ValueError('commitment has no points')
        for point in proposed.commitment:
            util.validate_curve_point(point)
    except (TypeError, ValueError) as e:
        raise ChallengeDerivationError(
            'malformed commitment from dealer {}: {}'.format(proposed.index, e)) from e


def keygen_validate_peers(peer_commitments, context: str) -> (tuple, tuple):
    """
    Check the proof of knowledge carried by every peer commitment.

    A commitment whose proof fails is dropped and its dealer index reported
    in the rejected list; the remaining commitments are still processed.
    A commitment with malformed points, or one that cannot be encoded for
    the challenge, aborts the whole call with ``ChallengeDerivationError``.

    Returns ``(rejected_indices, validated_commitments)``.
    """
    rejected = []
    validated = []

    for proposed in peer_commitments:
        _validate_commitment_points(proposed)
        challenge = zkp.derive_challenge(proposed.index, context, proposed.secret_commitment, proposed.proof.r)

        try:
            zkp.verify_knowledge(challenge, proposed)
        except ZKPVerificationError as e:
            logging.warning('rejecting commitment from dealer {}: {}'.format(proposed.index, e))
            rejected.append(proposed.index)
            continue

        validated.append(ValidatedCommitment(proposed.index, tuple(proposed.commitment), _token=_validation_token))

    return tuple(rejected), tuple(validated)


def keygen_finalize(index: int, threshold: int, shares, commitments) -> KeyPair:
    commitments_by_dealer = {}
    for comm in commitments:
        if comm.index in commitments_by_dealer:
            raise DuplicateDealerError(comm.index)
        commitments_by_dealer[comm.index] = comm

    seen_dealers = set()
    for share in shares:
        if share.receiver_index != index:
            raise ShareReceiverMismatchError(index, share.receiver_index)

        if share.dealer_index in seen_dealers:
            raise DuplicateDealerError(share.dealer_index)
        seen_dealers.add(share.dealer_index)

        comm = commitments_by_dealer.get(share.dealer_index)
        if comm is None:
            raise MissingCommitmentError(share.dealer_index)

        vss.verify_share(threshold, share, comm.commitment)

    for dealer_index in sorted(commitments_by_dealer.keys() - seen_dealers):
        logging.warning('missing share from validated dealer {}'.format(dealer_index))

    secret = sum(share.value for share in shares) % secp256k1.N
    group_public = functools.reduce(
        secp256k1.add,
        (comm.secret_commitment for comm in commitments),
        util.IDENTITY)

    return KeyPair(
        index=index,
        secret=secret,
        public=util.public_point(secret),
        group_public=group_public,
    )


class DKGSession(object):
    """
    One participant's view of one DKG round.

    The session moves through ``DKGPhase`` in order and refuses out of order
    calls with ``PhaseError``. Failed calls leave it in the phase it was in.
    """

    def __init__(self, index: int, num_participants: int, threshold: int, context: str = DEFAULT_CONTEXT):
        if num_participants < 1:
            raise InvalidShareCountError(num_participants)
        util.validate_index(index)
        if index > num_participants:
            raise ValueError('index {} outside of 1..{}'.format(index, num_participants))

        self.index = index
        self.num_participants = num_participants
        self.threshold = threshold
        self.context = context

        self.phase = DKGPhase.idle
        self.proposed_commitment = None
        self.shares = None
        self.rejected_indices = ()
        self.validated_commitments = ()
        self.key_pair = None

    def __repr__(self):
        return '<{}.{} index={} phase={}>'.format(__name__, self.__class__.__name__, self.index, self.phase.name)

    def _require_phase(self, phase: DKGPhase):
        if self.phase != phase:
            raise PhaseError('participant {} is in {} phase but {} is required'.format(
                self.index, self.phase.name, phase.name))

    def _advance_to_phase(self, target_phase: DKGPhase):
        self._require_phase(DKGPhase(target_phase - 1))
        logging.info('participant {} entering {} phase'.format(self.index, target_phase.name))
        self.phase = target_phase

    def begin(self) -> (ProposedCommitment, tuple):
        self._require_phase(DKGPhase.idle)

        proposed, shares = keygen_begin(self.num_participants, self.threshold, self.index, self.context)

        self.proposed_commitment = proposed
        self.shares = shares
        self._advance_to_phase(DKGPhase.began)
        return proposed, shares

    def share_for(self, receiver_index: int) -> vss.Share:
        if self.shares is None:
            raise PhaseError('participant {} has not generated shares yet'.format(self.index))
        if not 1 <= receiver_index <= len(self.shares):
            raise ValueError('no share for receiver {}'.format(receiver_index))
        return self.shares[receiver_index - 1]

    def validate_peers(self, peer_commitments) -> (tuple, tuple):
        self._require_phase(DKGPhase.began)

        peer_commitments = tuple(peer_commitments)
        seen = {self.index}
        for proposed in peer_commitments:
            if proposed.index in seen:
                raise DuplicateDealerError(proposed.index)
            seen.add(proposed.index)

        rejected, validated = keygen_validate_peers(peer_commitments, self.context)
        _, own = keygen_validate_peers((self.proposed_commitment,), self.context)

        self.rejected_indices = rejected
        self.validated_commitments = own + validated
        self._advance_to_phase(DKGPhase.peers_validated)
        return rejected, validated

    def finalize(self, received_shares) -> KeyPair:
        self._require_phase(DKGPhase.peers_validated)

        received_shares = tuple(received_shares)
        if not any(share.dealer_index == self.index for share in received_shares):
            received_shares = (self.share_for(self.index),) + received_shares

        key_pair = keygen_finalize(self.index, self.threshold, received_shares, self.validated_commitments)

        self.key_pair = key_pair
        self._advance_to_phase(DKGPhase.finalized)
        return key_pair
