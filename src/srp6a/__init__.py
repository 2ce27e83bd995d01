
from .errors import SRPError, UnknownGroup, MalformedInput, ProtocolAbort
from .groups import (SRPGroup, GroupRegistry, KNOWN_GROUP_SIZES,
                     known_group)
from .srp import (make_x, make_k, make_u, make_verifier, make_A,
                  make_client_key, make_M1, make_M2,
                  verify_M1, verify_M2, check_public_value)
from .keys import expand_session_key
SRPError, UnknownGroup, MalformedInput, ProtocolAbort # hush pyflakes
SRPGroup, GroupRegistry, KNOWN_GROUP_SIZES, known_group
make_x, make_k, make_u, make_verifier, make_A, make_client_key
make_M1, make_M2, verify_M1, verify_M2, check_public_value
expand_session_key

__version__ = "0.1.0"
