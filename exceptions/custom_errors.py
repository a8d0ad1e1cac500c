class UnknownShiftTypeError(Exception):
    """Raised when a shift type id does not exist in the catalog."""

    pass


class UnknownSpecialtyError(Exception):
    """Raised when a custom shift type is scoped to a specialty that is not in the roster."""

    pass


class DuplicateShiftTypeError(Exception):
    """Raised when a custom shift type reuses the id, name or abbreviation of another type."""

    pass


class ShiftTypeInUseError(Exception):
    """Raised when deleting a shift type that is still referenced by a shift."""

    pass


class StandardShiftTypeError(Exception):
    """Raised when attempting to delete or redefine one of the standard shift types."""

    pass


class InvalidShiftTypeError(Exception):
    """Raised when a custom shift type definition is malformed (e.g. start equals end)."""

    pass


class AssignmentRejectedError(Exception):
    """Raised when a proposed assignment is rejected by the conflict validator."""

    def __init__(self, decision):
        self.decision = decision
        super().__init__(decision.reason.value if decision.reason else "rejected")


# Mapping of custom exceptions to HTTP status codes
CUSTOM_ERRORS = {
    UnknownShiftTypeError: 404,
    UnknownSpecialtyError: 400,
    DuplicateShiftTypeError: 409,
    ShiftTypeInUseError: 409,
    StandardShiftTypeError: 400,
    InvalidShiftTypeError: 400,
    AssignmentRejectedError: 409,
}
