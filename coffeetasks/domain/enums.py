"""Domain enumerations for the coffee-shop task tracker.

Values match the strings stored in Firestore and read by the admin SPA.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class Role(_ValuesMixin, str, Enum):
    """Account role. Superadmins have no coffeeshop affiliation."""

    SUPERADMIN = "superadmin"
    ADMIN = "admin"
    STAFF = "staff"

    @classmethod
    def lowest(cls) -> "Role":
        """Role used when a profile cannot be read or is malformed."""
        return cls.STAFF


class TaskType(_ValuesMixin, str, Enum):
    """How a task is completed: tick a checkbox or attach a photo."""

    CHECKBOX = "checkbox"
    PHOTO = "photo"


class RepeatType(_ValuesMixin, str, Enum):
    """Recurrence kind of a task definition."""

    WEEKLY = "weekly"
    ONE_TIME = "one_time"


class TaskResultStatus(_ValuesMixin, str, Enum):
    """Workflow status of a materialized task result."""

    NOT_DONE = "Not_Done"
    IN_REVIEW = "In_Review"
    APPROVED = "Approved"
    REJECTED = "Rejected"
