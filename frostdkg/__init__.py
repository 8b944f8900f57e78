from .errors import (  # noqa: F401
    ChallengeDerivationError,
    CommitmentLengthMismatchError,
    DKGError,
    DuplicateDealerError,
    InputValidationError,
    InvalidShareCountError,
    InvalidThresholdError,
    MissingCommitmentError,
    PhaseError,
    ShareReceiverMismatchError,
    ShareVerificationError,
    SoundnessError,
    StructuralError,
    ThresholdExceedsSharesError,
    ZKPVerificationError,
)
from .keygen import (  # noqa: F401
    DEFAULT_CONTEXT,
    DKGPhase,
    DKGSession,
    KeyPair,
    ProposedCommitment,
    ValidatedCommitment,
    keygen_begin,
    keygen_finalize,
    keygen_validate_peers,
)
from .vss import Share, generate_shares, verify_share  # noqa: F401
from .zkp import SchnorrProof, derive_challenge, prove_knowledge, verify_knowledge  # noqa: F401
