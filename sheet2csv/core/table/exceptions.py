# sheet2csv/core/table/exceptions.py
"""
Grid access errors.
"""


class InvalidGridAccessError(Exception):
    """
    Raised when a coordinate-based or structural operation is attempted
    on a grid without rows or columns.

    The check happens before any mutation, so the grid is left untouched.
    """

    def __init__(self, message: str = "Can't access empty grid"):
        super().__init__(message)
