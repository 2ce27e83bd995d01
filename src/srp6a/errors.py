class SRPError(Exception):
    pass
class UnknownGroup(SRPError, KeyError):
    """The requested modulus size is not one of the standard groups."""
class MalformedInput(SRPError, ValueError):
    """A value had the wrong type, or was too wide for its modulus."""
class ProtocolAbort(SRPError):
    """The peer sent a degenerate value (zero modulo N, or one that
    collapses the shared key). The exchange must be abandoned: either the
    peer is broken or someone is trying to force a predictable key."""
