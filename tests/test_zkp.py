import pytest

from py_ecc.secp256k1 import secp256k1

from frostdkg import util, zkp
from frostdkg.errors import ChallengeDerivationError, ZKPVerificationError
from frostdkg.keygen import ProposedCommitment


def make_proof(index=1, context='test-context'):
    secret = util.random_private_value()
    nonce = util.random_private_value()
    public = util.public_point(secret)
    challenge = zkp.derive_challenge(index, context, public, util.public_point(nonce))
    proof = zkp.prove_knowledge(secret, challenge, nonce)
    return ProposedCommitment(index=index, commitment=(public,), proof=proof), challenge


def test_challenge_input_layout():
    public = util.public_point(5)
    commitment_point = util.public_point(7)
    encoded = zkp.encode_challenge_input(0x1234, 'ab', public, commitment_point)

    assert len(encoded) == zkp.CHALLENGE_INPUT_WIDTH == 170
    assert encoded[0:64] == util.curve_point_to_bytes(commitment_point)
    assert encoded[64:128] == util.curve_point_to_bytes(public)
    assert encoded[128:138] == b'\0' * 8 + b'\x12\x34'
    assert encoded[138:170] == b'\0' * 30 + b'ab'


def test_challenge_is_deterministic():
    public = util.public_point(11)
    r = util.public_point(13)
    assert zkp.derive_challenge(3, 'ctx', public, r) == zkp.derive_challenge(3, 'ctx', public, r)


def test_challenge_binds_every_input():
    public = util.public_point(11)
    r = util.public_point(13)
    base = zkp.derive_challenge(3, 'ctx', public, r)

    assert zkp.derive_challenge(4, 'ctx', public, r) != base
    assert zkp.derive_challenge(3, 'ctx2', public, r) != base
    assert zkp.derive_challenge(3, 'ctx', util.public_point(12), r) != base
    assert zkp.derive_challenge(3, 'ctx', public, util.public_point(14)) != base


def test_challenge_maps_digest_through_field_then_scalar():
    encoded = zkp.encode_challenge_input(1, 'x', util.public_point(2), util.public_point(3))
    digest = util.sha3_256(encoded)
    expected = int.from_bytes(digest, 'big') % secp256k1.P % secp256k1.N
    assert zkp.derive_challenge(1, 'x', util.public_point(2), util.public_point(3)) == expected


def test_challenge_accepts_full_width_fields():
    zkp.derive_challenge(2**80 - 1, 'c' * 32, util.public_point(2), util.public_point(3))


@pytest.mark.parametrize('index,context', [
    (2**80, 'ctx'),
    (1, 'c' * 33),
    (1, 'é' * 17),
])
def test_oversized_challenge_field_is_an_error(index, context):
    with pytest.raises(ChallengeDerivationError):
        zkp.derive_challenge(index, context, util.public_point(2), util.public_point(3))


@pytest.mark.parametrize('index,context,public', [
    (-1, 'ctx', util.public_point(2)),
    ('1', 'ctx', util.public_point(2)),
    (1, b'ctx', util.public_point(2)),
    (1, 'ctx', (1, 1)),
    (1, 'ctx', (secp256k1.P, 0)),
    (1, 'ctx', None),
])
def test_malformed_challenge_input_is_an_error(index, context, public):
    with pytest.raises(ChallengeDerivationError):
        zkp.derive_challenge(index, context, public, util.public_point(3))


def test_honest_proof_verifies():
    proposed, challenge = make_proof()
    zkp.verify_knowledge(challenge, proposed)


def test_proof_rejected_under_other_context():
    proposed, _ = make_proof(context='round-1')
    challenge = zkp.derive_challenge(proposed.index, 'round-2', proposed.secret_commitment, proposed.proof.r)
    with pytest.raises(ZKPVerificationError) as excinfo:
        zkp.verify_knowledge(challenge, proposed)
    assert excinfo.value.dealer_index == proposed.index


def test_proof_rejected_for_other_commitment():
    proposed, _ = make_proof()
    other_public = util.public_point(util.random_private_value())
    swapped = proposed._replace(commitment=(other_public,))
    challenge = zkp.derive_challenge(swapped.index, 'test-context', other_public, swapped.proof.r)
    with pytest.raises(ZKPVerificationError):
        zkp.verify_knowledge(challenge, swapped)


def test_proof_rejected_with_tampered_response():
    proposed, challenge = make_proof()
    tampered = proposed._replace(proof=proposed.proof._replace(z=(proposed.proof.z + 1) % secp256k1.N))
    with pytest.raises(ZKPVerificationError):
        zkp.verify_knowledge(challenge, tampered)


def test_proof_rejected_with_out_of_range_response():
    proposed, challenge = make_proof()
    tampered = proposed._replace(proof=proposed.proof._replace(z=proposed.proof.z + secp256k1.N))
    with pytest.raises(ZKPVerificationError):
        zkp.verify_knowledge(challenge, tampered)
