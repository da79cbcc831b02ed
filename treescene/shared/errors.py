"""Error types raised by the flatten / layout / scene pipeline."""


class TreeSceneError(ValueError):
    """Base class for all pipeline errors."""


class ContractViolation(TreeSceneError):
    """The tree adapter broke its contract (size mismatch, cycle, bad parent link)."""


class OutOfRange(ContractViolation, IndexError):
    """A record write went past the buffer sized from size(root)."""


class InvalidParameter(TreeSceneError):
    """Style parameter out of range (e.g. non-positive box size)."""


class EmptyTree(TreeSceneError):
    """The adapter reported a tree with no nodes."""
