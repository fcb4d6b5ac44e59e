from ...lib.models.package_set import MenuEntry, PackageSetMenu
from ..profile import Profile
from .cinnamon import CinnamonMinimalProfile, CinnamonProfile
from .gnome import GnomeMinimalProfile, GnomeProfile
from .plasma import PlasmaMinimalProfile, PlasmaProfile

FULL_DESKTOPS: list[Profile] = [GnomeProfile(), PlasmaProfile(), CinnamonProfile()]
MINIMAL_DESKTOPS: list[Profile] = [GnomeMinimalProfile(), PlasmaMinimalProfile(), CinnamonMinimalProfile()]


def desktop_menu(title: str, profiles: list[Profile]) -> PackageSetMenu:
	"""
	Offers the given profiles as a single choice menu numbered from 1.
	"""
	entries = [MenuEntry(str(index), profile.description, profile.as_package_set()) for index, profile in enumerate(profiles, start=1)]

	return PackageSetMenu(
		title,
		tuple(entries),
		prompt=f'Enter your choice (1-{len(entries)}): ',
		default='1',
	)


def profile_for(name: str) -> Profile:
	for profile in FULL_DESKTOPS + MINIMAL_DESKTOPS:
		if profile.name == name:
			return profile

	raise ValueError(f'No desktop profile named {name}')


DESKTOP_FULL_MENU = desktop_menu('Select Desktop Environment', FULL_DESKTOPS)
DESKTOP_MINIMAL_MENU = desktop_menu('Select Minimal Desktop Environment', MINIMAL_DESKTOPS)

__all__ = [
	'CinnamonMinimalProfile',
	'CinnamonProfile',
	'DESKTOP_FULL_MENU',
	'DESKTOP_MINIMAL_MENU',
	'FULL_DESKTOPS',
	'GnomeMinimalProfile',
	'GnomeProfile',
	'MINIMAL_DESKTOPS',
	'PlasmaMinimalProfile',
	'PlasmaProfile',
	'desktop_menu',
	'profile_for',
]
