"""
Exceptions raised by the MST toolkit
"""


class MSTError(Exception):
    """Base class for all MST toolkit errors"""


class InvalidGraphError(MSTError, ValueError):
    """Input rejected before any algorithmic work starts"""


class MSTComputationError(MSTError):
    """The algorithm finished without a spanning tree (graph disconnected)"""

    def __init__(self, algorithm_name, expected_edges, actual_edges):
        self.algorithm_name = algorithm_name
        self.expected_edges = expected_edges
        self.actual_edges = actual_edges
        super().__init__(
            f"{algorithm_name} MST construction failed. Expected {expected_edges} "
            f"edges but got {actual_edges}. Graph may be disconnected."
        )
