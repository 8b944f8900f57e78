import collections
import logging
import math

from py_ecc.secp256k1 import secp256k1

from . import wire
from .keygen import DEFAULT_CONTEXT, DKGSession

THRESHOLD_FACTOR = .5

SimulationResult = collections.namedtuple('SimulationResult', ('key_pairs', 'rejected'))


def default_threshold(num_participants: int) -> int:
    return max(1, math.ceil(THRESHOLD_FACTOR * num_participants))


def corrupt_proof(proposed):
    proof = proposed.proof._replace(z=(proposed.proof.z + 1) % secp256k1.N)
    return proposed._replace(proof=proof)


def run_simulated_dkg(num_participants: int,
                      threshold: int = None,
                      context: str = DEFAULT_CONTEXT,
                      corrupt_dealers=()) -> SimulationResult:
    """
    Run a whole round between ``num_participants`` in-process sessions.

    Commitments and shares go through the byte codecs as if sent over the
    wire; each share only reaches its receiver. Dealers listed in
    ``corrupt_dealers`` publish a tampered proof.

    ``key_pairs`` and ``rejected`` map participant index to that
    participant's key pair and rejected dealer indices.
    """
    if threshold is None:
        threshold = default_threshold(num_participants)

    corrupt_dealers = frozenset(corrupt_dealers)
    for dealer_index in corrupt_dealers:
        if not 1 <= dealer_index <= num_participants:
            raise ValueError('corrupt dealer {} outside of 1..{}'.format(dealer_index, num_participants))

    sessions = tuple(DKGSession(i, num_participants, threshold, context) for i in range(1, num_participants + 1))

    logging.info('handling key distribution phase...')
    broadcast = {}
    mailboxes = collections.defaultdict(list)
    for session in sessions:
        proposed, shares = session.begin()

        if session.index in corrupt_dealers:
            logging.debug('corrupting proof of dealer {}'.format(session.index))
            proposed = corrupt_proof(proposed)

        broadcast[session.index] = wire.bytes_to_proposed_commitment(wire.proposed_commitment_to_bytes(proposed))

        for share in shares:
            if share.receiver_index != session.index:
                mailboxes[share.receiver_index].append(wire.share_to_bytes(share))

    logging.info('handling key verification phase...')
    key_pairs = {}
    rejected = {}
    for session in sessions:
        peers = tuple(proposed for index, proposed in broadcast.items() if index != session.index)
        rejected[session.index], validated = session.validate_peers(peers)

        accepted = {comm.index for comm in validated}
        received = tuple(
            share
            for share in (wire.bytes_to_share(bts) for bts in mailboxes[session.index])
            if share.dealer_index in accepted
        )

        key_pairs[session.index] = session.finalize(received)

    logging.info('round complete')
    return SimulationResult(key_pairs=key_pairs, rejected=rejected)
