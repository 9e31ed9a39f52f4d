"""
Exception hierarchy for densematrix.

All exceptions inherit from DenseMatrixError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Precondition failures are raised before any mutation happens
"""


class DenseMatrixError(Exception):
    """Base exception for all densematrix errors."""
    pass


class ValidationError(DenseMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs (shapes, fill values, array-likes)
    fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when an input has the wrong number of dimensions or when
    several inputs have inconsistent lengths.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Operand shapes violate an operation's dimensional precondition.

    Raised by add_matrix/subtract_matrix when shapes differ, and by
    multiply when the left column count differs from the right row count.
    The receiver is never modified when this is raised.

    Attributes:
        operation: Name of the operation that failed ('add', 'multiply', ...)
        left_shape: Shape of the receiver (rows, columns)
        right_shape: Shape of the operand (rows, columns)
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Cell index outside [0, rows) x [0, columns).

    Raised only by the checked indexer (``m[i, j]``). The unchecked
    get()/set() pair leaves range checking to the caller.

    Attributes:
        index: The offending (row, column) pair
        shape: Shape of the matrix that was indexed
    """

    def __init__(
        self,
        message: str,
        index: tuple | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape
