"""Domain exceptions."""


class CampDeskError(Exception):
    """Base exception for CampDesk."""

    pass


class PermissionDenied(CampDeskError):
    """User does not have permission for the requested action."""

    pass


class NotFound(CampDeskError):
    """Requested resource was not found."""

    pass


class ValidationError(CampDeskError):
    """Validation failed for input data."""

    pass


class Conflict(CampDeskError):
    """Request conflicts with current state."""

    pass


class DuplicatePermission(Conflict):
    """Permission set already has an entry for this resource and action."""

    pass


class DuplicateAssignment(Conflict):
    """Permission set is already assigned to the user."""

    pass


class RegistrationConflict(Conflict):
    """Camp cannot take this registration right now."""

    code = "REGISTRATION_CONFLICT"


class CampFull(RegistrationConflict):
    """Camp reached capacity and has no waitlist."""

    code = "CAMP_FULL"


class RegistrationClosed(RegistrationConflict):
    """Registration window is not open for the camp."""

    code = "REGISTRATION_CLOSED"
