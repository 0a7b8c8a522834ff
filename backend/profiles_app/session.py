"""
Holder for the currently authenticated profile.
"""
from typing import Optional

from profiles_app.models.profile import Admin, Profile


class SessionHolder:
    """
    Keeps the profile of the single operator using the application.
    
    Set by a successful login and left untouched by a failed one.
    """
    
    def __init__(self):
        self._profile: Optional[Profile] = None
    
    @property
    def profile(self) -> Optional[Profile]:
        return self._profile
    
    @property
    def is_authenticated(self) -> bool:
        return self._profile is not None
    
    @property
    def is_admin(self) -> bool:
        return isinstance(self._profile, Admin)
    
    def set_profile(self, profile: Profile) -> None:
        """Replace the current session profile."""
        self._profile = profile
    
    def clear(self) -> None:
        self._profile = None
