"""User roles."""

from enum import StrEnum


class UserRole(StrEnum):
    """Roles a user can hold. UNKNOWN covers legacy values awaiting migration."""

    PARENT = "parent"
    CAMP_CREATOR = "camp_creator"
    MANAGER = "manager"
    COACH = "coach"
    VOLUNTEER = "volunteer"
    ATHLETE = "athlete"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> "UserRole":
        """Decode a stored role, mapping anything unrecognised to UNKNOWN."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN

    @property
    def label(self) -> str:
        return format_role(self.value)


def format_role(role: str) -> str:
    """camp_creator -> Camp Creator."""
    return " ".join(word.capitalize() for word in role.replace("_", " ").split())
