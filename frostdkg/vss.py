"""
Shamir secret sharing with Feldman commitments over secp256k1.

A dealer's polynomial has ``threshold`` coefficients with the shared secret
as the constant term. The commitment to the polynomial is the tuple of
coefficient points ``g^a_k``; index 0 is the dealer's public key for the
secret. Anyone holding the commitment can check a share without learning the
polynomial by evaluating the commitment "in the exponent".
"""
import collections
import functools
import logging

from py_ecc.secp256k1 import secp256k1

from . import util
from .errors import (
    CommitmentLengthMismatchError,
    InvalidShareCountError,
    InvalidThresholdError,
    ShareVerificationError,
    ThresholdExceedsSharesError,
)

Share = collections.namedtuple('Share', ('dealer_index', 'receiver_index', 'value'))


def random_polynomial(order: int) -> tuple:
    return tuple(util.random_private_value() for _ in range(order))


def eval_polynomial(poly: tuple, x: int) -> int:
    # Horner's rule, highest degree coefficient first
    return functools.reduce(lambda acc, coeff: (acc * x + coeff) % secp256k1.N, reversed(poly), 0)


def eval_commitment(commitment: tuple, x: int) -> (int, int):
    return functools.reduce(
        lambda acc, point: secp256k1.add(secp256k1.multiply(acc, x), point),
        reversed(commitment),
        util.IDENTITY)


def generate_commitment(poly: tuple) -> tuple:
    return tuple(util.public_point(coeff) for coeff in poly)


def generate_shares(secret: int, num_shares: int, threshold: int, dealer_index: int) -> (tuple, tuple):
    """
    Split ``secret`` into ``num_shares`` shares, any ``threshold`` of which
    determine it.

    Returns ``(commitment, shares)`` where ``commitment`` has ``threshold``
    points and ``shares[i]`` is the evaluation at receiver index ``i + 1``.
    ``dealer_index`` only tags the shares; it is never an evaluation point.
    """
    if threshold < 1:
        raise InvalidThresholdError(threshold)
    if num_shares < 1:
        raise InvalidShareCountError(num_shares)
    if threshold > num_shares:
        raise ThresholdExceedsSharesError(threshold, num_shares)

    poly = (secret,) + random_polynomial(threshold - 1)
    util.validate_polynomial(poly)
    commitment = generate_commitment(poly)

    shares = tuple(
        Share(dealer_index=dealer_index, receiver_index=i, value=eval_polynomial(poly, i))
        for i in range(1, num_shares + 1)
    )

    logging.debug('dealer {} generated {} shares with threshold {}'.format(dealer_index, num_shares, threshold))

    return commitment, shares


def verify_share(threshold: int, share: Share, commitment: tuple):
    if len(commitment) != threshold:
        raise CommitmentLengthMismatchError(threshold, len(commitment))

    try:
        util.validate_private_value(share.value)
    except ValueError as e:
        raise ShareVerificationError(share.dealer_index, share.receiver_index) from e

    lhs = util.public_point(share.value)
    rhs = eval_commitment(commitment, share.receiver_index)

    if lhs != rhs:
        raise ShareVerificationError(share.dealer_index, share.receiver_index)
