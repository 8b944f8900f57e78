import functools

from secrets import SystemRandom

from Crypto.Hash import SHA3_256
from py_ecc.secp256k1 import secp256k1

random = SystemRandom()

# (0, 0) is used to represent group identity element
IDENTITY = (0, 0)


########################
# Validation utilities #
########################


def validate_private_value(value: int):
    if not isinstance(value, int) or value < 0 or value >= secp256k1.N:
        raise ValueError('invalid EC private value {!r}'.format(value))


def validate_polynomial(polynomial: tuple):
    for i, coeff in enumerate(polynomial):
        try:
            validate_private_value(coeff)
        except ValueError:
            raise ValueError('invalid x^{} coefficient {!r}'.format(i, coeff))


def validate_curve_point(point: (int, int)):
    if len(point) != 2 or not all(isinstance(coord, int) for coord in point):
        raise ValueError('invalid EC point {!r}'.format(point))

    if (
        any(coord < 0 or coord >= secp256k1.P for coord in point) or
        pow(point[1], 2, secp256k1.P) != (pow(point[0], 3, secp256k1.P) + 7) % secp256k1.P
    ) and point != IDENTITY:
        raise ValueError('invalid EC point {}'.format(point))


def validate_index(index: int):
    if not isinstance(index, int) or isinstance(index, bool) or index < 1 or index >= 2**256:
        raise ValueError('invalid participant index {!r}'.format(index))


########################
# Conversion utilities #
########################


def private_value_to_bytes(value: int) -> bytes:
    validate_private_value(value)
    return value.to_bytes(32, byteorder='big')


def bytes_to_private_value(bts: bytes) -> int:
    if len(bts) != 32:
        raise ValueError('unexpected length {} bytes'.format(len(bts)))
    priv = int.from_bytes(bts, byteorder='big')
    validate_private_value(priv)
    return priv


def index_to_bytes(index: int) -> bytes:
    validate_index(index)
    return index.to_bytes(32, byteorder='big')


def bytes_to_index(bts: bytes) -> int:
    if len(bts) != 32:
        raise ValueError('unexpected length {} bytes'.format(len(bts)))
    index = int.from_bytes(bts, byteorder='big')
    validate_index(index)
    return index


def curve_point_to_bytes(point: (int, int)) -> bytes:
    validate_curve_point(point)
    return sequence_256_bit_values_to_bytes(point)


def bytes_to_curve_point(bts: bytes) -> (int, int):
    if len(bts) != 64:
        raise ValueError('unexpected length {} bytes'.format(len(bts)))
    point = tuple(int.from_bytes(bts[i:i+32], byteorder='big') for i in (0, 32))
    validate_curve_point(point)
    return point


def curve_point_to_hex(point: (int, int)) -> str:
    validate_curve_point(point)
    return '{0[0]:064x}{0[1]:064x}'.format(point)


def hex_to_curve_point(hexstr: str) -> (int, int):
    if len(hexstr) != 128:
        raise ValueError('unexpected length {} hex digits'.format(len(hexstr)))
    point = tuple(int(hexstr[i:i+64], 16) for i in (0, 64))
    validate_curve_point(point)
    return point


def curve_point_tuple_to_bytes(points: tuple) -> bytes:
    return b''.join(curve_point_to_bytes(point) for point in points)


def bytes_to_curve_point_tuple(bts: bytes) -> tuple:
    if len(bts) % 64 != 0:
        raise ValueError('length {} not divisible by 64 bytes'.format(len(bts)))
    return tuple(bytes_to_curve_point(bts[i:i+64]) for i in range(0, len(bts), 64))


def sequence_256_bit_values_to_bytes(sequence: tuple) -> bytes:
    return b''.join(map(functools.partial(int.to_bytes, length=32, byteorder='big'), sequence))


##################
# Group helpers  #
##################


def negate_curve_point(point: (int, int)) -> (int, int):
    if point == IDENTITY:
        return point
    return (point[0], (-point[1]) % secp256k1.P)


def subtract_curve_points(a: (int, int), b: (int, int)) -> (int, int):
    return secp256k1.add(a, negate_curve_point(b))


def public_point(value: int) -> (int, int):
    return secp256k1.multiply(secp256k1.G, value)


###################
# Hash utilities  #
###################


def sha3_256(data: bytes) -> bytes:
    return SHA3_256.new(data).digest()


###################
# Other utilities #
###################


def random_private_value() -> int:
    return random.randrange(secp256k1.N)
