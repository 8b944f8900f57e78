class DKGError(Exception):
    pass


class PhaseError(DKGError):
    pass


#############################
# Input validation failures #
#############################


class InputValidationError(DKGError, ValueError):
    pass


class InvalidThresholdError(InputValidationError):
    def __init__(self, threshold: int, *args):
        super().__init__('threshold must be at least 1 but got {}'.format(threshold), *args)
        self.threshold = threshold


class InvalidShareCountError(InputValidationError):
    def __init__(self, num_shares: int, *args):
        super().__init__('number of shares must be at least 1 but got {}'.format(num_shares), *args)
        self.num_shares = num_shares


class ThresholdExceedsSharesError(InputValidationError):
    def __init__(self, threshold: int, num_shares: int, *args):
        super().__init__('threshold {} exceeds number of shares {}'.format(threshold, num_shares), *args)
        self.threshold = threshold
        self.num_shares = num_shares


class CommitmentLengthMismatchError(InputValidationError):
    def __init__(self, expected: int, actual: int, *args):
        super().__init__('commitment has {} points but threshold is {}'.format(actual, expected), *args)
        self.expected = expected
        self.actual = actual


###########################################
# Cryptographic soundness failures        #
# (a dishonest or faulty dealer produced  #
#  well formed but invalid material)      #
###########################################


class SoundnessError(DKGError):
    def __init__(self, dealer_index: int, *args):
        super().__init__(*args)
        self.dealer_index = dealer_index


class ShareVerificationError(SoundnessError):
    def __init__(self, dealer_index: int, receiver_index: int, *args):
        super().__init__(
            dealer_index,
            'share from dealer {} for receiver {} does not match commitment'.format(dealer_index, receiver_index),
            *args)
        self.receiver_index = receiver_index


class ZKPVerificationError(SoundnessError):
    def __init__(self, dealer_index: int, *args):
        super().__init__(
            dealer_index,
            'proof of knowledge from dealer {} is invalid'.format(dealer_index),
            *args)


#################################
# Structural/encoding failures  #
#################################


class StructuralError(DKGError, ValueError):
    pass


class ChallengeDerivationError(StructuralError):
    pass


class MissingCommitmentError(StructuralError):
    def __init__(self, dealer_index: int, *args):
        super().__init__('received share from dealer {} with no validated commitment'.format(dealer_index), *args)
        self.dealer_index = dealer_index


class DuplicateDealerError(StructuralError):
    def __init__(self, dealer_index: int, *args):
        super().__init__('dealer index {} appears more than once'.format(dealer_index), *args)
        self.dealer_index = dealer_index


class ShareReceiverMismatchError(StructuralError):
    def __init__(self, expected: int, actual: int, *args):
        super().__init__('share addressed to receiver {} but own index is {}'.format(actual, expected), *args)
        self.expected = expected
        self.actual = actual
