from typing import override

from ..profile import DesktopProfile, GreeterType


class CinnamonProfile(DesktopProfile):
	def __init__(self) -> None:
		super().__init__('Cinnamon', description='Cinnamon (full experience)')

	@property
	@override
	def packages(self) -> list[str]:
		return [
			'cinnamon',
			'cinnamon-translations',
			'lightdm',
			'lightdm-gtk-greeter',
			'power-profiles-daemon',
			'xdg-desktop-portal-xapp',
			'nemo-fileroller',
			'file-roller',
			'gnome-screenshot',
			'gnome-calculator',
			'gedit',
		]

	@property
	@override
	def default_greeter_type(self) -> GreeterType:
		return GreeterType.Lightdm


class CinnamonMinimalProfile(DesktopProfile):
	def __init__(self) -> None:
		super().__init__('Cinnamon Minimal', description='Cinnamon (minimal desktop)', minimal=True)

	@property
	@override
	def packages(self) -> list[str]:
		return [
			'cinnamon',
			'lightdm',
			'lightdm-gtk-greeter',
			'power-profiles-daemon',
			'xdg-desktop-portal-xapp',
			'nemo',
			'gnome-calculator',
			'xed',
		]

	@property
	@override
	def default_greeter_type(self) -> GreeterType:
		return GreeterType.Lightdm
