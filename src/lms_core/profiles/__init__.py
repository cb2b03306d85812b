"""Profile lookups against the hosted backend."""

from lms_core.profiles.client import BackendError, ProfileClient, ProfileNotFound
from lms_core.profiles.models import Profile, Role
from lms_core.profiles.service import ProfileService

__all__ = [
    "BackendError",
    "Profile",
    "ProfileClient",
    "ProfileNotFound",
    "ProfileService",
    "Role",
]
