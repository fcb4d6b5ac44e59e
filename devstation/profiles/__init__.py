from .desktops import DESKTOP_FULL_MENU, DESKTOP_MINIMAL_MENU, profile_for
from .profile import DesktopProfile, GreeterType, Profile, ProfileType

__all__ = [
	'DESKTOP_FULL_MENU',
	'DESKTOP_MINIMAL_MENU',
	'DesktopProfile',
	'GreeterType',
	'Profile',
	'ProfileType',
	'profile_for',
]
