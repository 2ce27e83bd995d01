import hmac
import logging
from hashlib import sha1
from .errors import ProtocolAbort
from .util import bytes_to_number, to_bytes, require_bytes, pad, xor_bytes

DEFAULT_HASH = sha1

log = logging.getLogger(__name__)

# Notation follows RFC 5054:
#
# x = H(s | H(I | ":" | P))
# k = H(N | PAD(g))
# u = H(PAD(A) | PAD(B))
# v = g^x % N
# A = g^a % N
# K = (B - (k * g^x)) ^ (a + (u * x)) % N
# M1 = H(H(N) XOR H(g) | H(I) | s | A | B | K)
# M2 = H(A | M1 | K)
#
# Every function takes and returns bytes. Integers only exist between the
# bytes_to_number() at the top of a function and the element_to_bytes() at
# the bottom. 'hashfunc' is a hashlib-style constructor, and must be the
# same for every step of one exchange.

def _H(hashfunc, *pieces):
    return hashfunc(b"".join(map(require_bytes, pieces))).digest()

def make_x(I, P, s, hashfunc=DEFAULT_HASH):
    inner = _H(hashfunc, to_bytes(I), b":", to_bytes(P))
    return _H(hashfunc, s, inner)

def make_k(group, hashfunc=DEFAULT_HASH):
    return _H(hashfunc, group.N_bytes, pad(group.g_bytes, group.N_bytes))

def make_u(A, B, group, hashfunc=DEFAULT_HASH):
    N = group.N_bytes
    return _H(hashfunc, pad(require_bytes(A), N), pad(require_bytes(B), N))

def make_verifier(I, P, s, group, hashfunc=DEFAULT_HASH):
    """Compute the verifier v = g^x % N that the server stores in place of
    the password. Returns bytes as wide as N."""
    x = bytes_to_number(make_x(I, P, s, hashfunc))
    return group.element_to_bytes(pow(group.g, x, group.N))

def make_A(a, group):
    """Compute the client's public value A = g^a % N from the random
    private value 'a' (bytes)."""
    a = bytes_to_number(a)
    return group.element_to_bytes(pow(group.g, a, group.N))

def check_public_value(value, group):
    """Reject a public value (A or B) that is zero modulo N.

    A server must run this on A, and a client on B, before doing anything
    else with it: a peer that sends 0, N, 2N... can predict the shared
    key without knowing the password. Returns the value as an int.
    """
    i = bytes_to_number(value)
    if i % group.N == 0:
        log.warning("rejecting public value that is 0 mod N")
        raise ProtocolAbort("public value is zero modulo N")
    return i

def make_client_key(I, P, s, a, A, B, group, hashfunc=DEFAULT_HASH,
                    strict=True):
    """Derive the shared key on the client side.

    I and P are the identity and password (str or bytes), s the salt, a the
    client's private value, A the client's public value, and B the value
    the server sent back. With strict=True (the default), a B that is zero
    modulo N, a zero scrambler u, or a base that reduces to zero raises
    ProtocolAbort instead of producing a key an attacker could predict.
    """
    N, g = group.N, group.g
    if strict:
        B_num = check_public_value(B, group)
    else:
        B_num = bytes_to_number(B)
    x = bytes_to_number(make_x(I, P, s, hashfunc))
    k = bytes_to_number(make_k(group, hashfunc))
    u = bytes_to_number(make_u(A, B, group, hashfunc))
    if strict and u == 0:
        log.warning("rejecting exchange with zero scrambler")
        raise ProtocolAbort("scrambling parameter u is zero")

    base = (B_num - (k * pow(g, x, N))) % N
    if strict and base == 0:
        log.warning("rejecting exchange with degenerate base")
        raise ProtocolAbort("B - k*v reduces to zero")
    exponent = bytes_to_number(a) + u * x
    return group.element_to_bytes(pow(base, exponent, N))

def make_M1(I, s, A, B, K, group, hashfunc=DEFAULT_HASH):
    hN = _H(hashfunc, group.N_bytes)
    hg = _H(hashfunc, group.g_bytes)
    return _H(hashfunc, xor_bytes(hN, hg), _H(hashfunc, to_bytes(I)),
              s, A, B, K)

def make_M2(A, M1, K, hashfunc=DEFAULT_HASH):
    return _H(hashfunc, A, M1, K)

def verify_M1(I, s, A, B, K, M1, group, hashfunc=DEFAULT_HASH):
    expected = make_M1(I, s, A, B, K, group, hashfunc)
    return hmac.compare_digest(expected, require_bytes(M1))

def verify_M2(A, M1, K, M2, hashfunc=DEFAULT_HASH):
    expected = make_M2(A, M1, K, hashfunc)
    return hmac.compare_digest(expected, require_bytes(M2))
