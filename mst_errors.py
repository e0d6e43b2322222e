"""
Exceptions raised by the MST engine
"""


class MSTError(Exception):
    """Base class for every error raised by the MST engine"""


class OutOfRangeError(MSTError, IndexError):
    """A vertex id outside [0, V) was passed to a graph or structure"""

    def __init__(self, vertex, bound):
        super().__init__(f"vertex {vertex} is not between 0 and {bound - 1}")
        self.vertex = vertex
        self.bound = bound


class DuplicateInsertError(MSTError, ValueError):
    """Id is already present in the priority queue"""


class InvalidKeyUpdateError(MSTError, ValueError):
    """decrease_key called for an absent id or with a key that is not smaller"""


class EmptyQueueError(MSTError, IndexError):
    """delete_min called on an empty priority queue"""


class FrozenGraphError(MSTError, RuntimeError):
    """Edge added to a graph after its build phase ended"""


class UnknownVertexError(MSTError, KeyError):
    """Edge endpoint label does not name a known vertex"""


class MSTCheckError(MSTError, AssertionError):
    """A solver run with check=True produced a forest that fails check_mst()"""
