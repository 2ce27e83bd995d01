from hashlib import sha1, sha256
from itertools import count
from srp6a.util import bytes_to_number
from srp6a.srp import make_x, make_k, make_u

class PRG:
    # this returns a callable which, when invoked with an integer N, will
    # return N pseudorandom bytes derived from the seed
    def __init__(self, seed):
        self.generator = self.block_generator(seed)

    def __call__(self, numbytes):
        return b"".join([next(self.generator) for i in range(numbytes)])

    def block_generator(self, seed):
        assert isinstance(seed, type(b""))
        for counter in count():
            cseed = b"".join([b"prng-",
                              str(counter).encode("ascii"),
                              b"-",
                              seed])
            block = sha256(cseed).digest()
            for i in range(len(block)):
                yield block[i:i+1]

class Server:
    """The server half of SRP-6a, kept here only to check the client.

    B = (k*v + g^b) % N
    S = (A * v^u) ^ b % N
    """
    def __init__(self, I, P, s, b, group, hashfunc=sha1):
        self.group = group
        self.hashfunc = hashfunc
        N, g = group.N, group.g
        x = bytes_to_number(make_x(I, P, s, hashfunc))
        self.v = pow(g, x, N)
        self.b = bytes_to_number(b)
        k = bytes_to_number(make_k(group, hashfunc))
        self.B = group.element_to_bytes((k * self.v + pow(g, self.b, N)) % N)

    def key(self, A):
        N = self.group.N
        u = bytes_to_number(make_u(A, self.B, self.group, self.hashfunc))
        base = bytes_to_number(A) * pow(self.v, u, N)
        return self.group.element_to_bytes(pow(base, self.b, N))
