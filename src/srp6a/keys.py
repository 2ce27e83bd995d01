from hashlib import sha256
from hkdf import Hkdf
from .util import require_bytes

def expand_session_key(K, info, length, salt=b"", hashfunc=sha256):
    """Stretch the SRP shared key into 'length' bytes of key material for
    one purpose, named by 'info'. Different 'info' strings give
    independent keys from the same K."""
    h = Hkdf(salt=require_bytes(salt), input_key_material=require_bytes(K),
             hash=hashfunc)
    return h.expand(require_bytes(info), length)
