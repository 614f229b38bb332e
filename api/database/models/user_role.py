"""
User roles.
"""

from enum import Enum


class UserRole(str, Enum):
    """
    Role attached to every user and carried by its credential.

    Values are case-sensitive: "User" and "Admin" are the only accepted
    spellings.
    """

    USER = "User"
    ADMIN = "Admin"

    @classmethod
    def parse(cls, value: str) -> "UserRole":
        """
        Parse a role tag without case folding.

        Raises:
            ValueError: If the value is not exactly "User" or "Admin"
        """
        for role in cls:
            if role.value == value:
                return role
        raise ValueError(f"Invalid role {value!r}, expected 'User' or 'Admin'")
