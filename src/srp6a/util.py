import math
from binascii import hexlify
from .errors import MalformedInput

def size_bits(maxval):
    return maxval.bit_length() or 1

def size_bytes(maxval):
    return int(math.ceil(size_bits(maxval) / 8))

def number_to_bytes(num, maxval):
    if not 0 <= num <= maxval:
        raise MalformedInput("%d bits will not fit in %d"
                             % (size_bits(num), size_bits(maxval)))
    s = num.to_bytes(size_bytes(maxval), "big")
    assert isinstance(s, bytes)
    return s

def bytes_to_number(s):
    if not isinstance(s, (bytes, bytearray)):
        raise MalformedInput("expected bytes, got %s" % type(s).__name__)
    if not s:
        return 0
    return int(hexlify(s), 16)

def to_bytes(s):
    # identities and passwords are hashed in their UTF-8 form
    if isinstance(s, str):
        return s.encode("utf-8")
    if isinstance(s, (bytes, bytearray)):
        return bytes(s)
    raise MalformedInput("expected str or bytes, got %s" % type(s).__name__)

def pad(value, modulus):
    """Left-pad 'value' with zero bytes to the width of 'modulus'.

    Both arguments are byte strings. A value that is already as wide as
    the modulus (or wider) comes back unchanged.
    """
    return b"\x00" * max(0, len(modulus) - len(value)) + value

def require_bytes(s):
    if not isinstance(s, (bytes, bytearray)):
        raise MalformedInput("expected bytes, got %s" % type(s).__name__)
    return bytes(s)

def xor_bytes(a, b):
    if len(a) != len(b):
        raise MalformedInput("cannot xor %d bytes with %d" % (len(a), len(b)))
    return bytes(x ^ y for (x, y) in zip(a, b))
