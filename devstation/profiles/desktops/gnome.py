from typing import override

from ..profile import DesktopProfile, GreeterType


class GnomeProfile(DesktopProfile):
	def __init__(self) -> None:
		super().__init__('GNOME', description='GNOME (full group)')

	@property
	@override
	def packages(self) -> list[str]:
		return [
			'gnome',
			'gnome-extra',
			'power-profiles-daemon',
		]

	@property
	@override
	def default_greeter_type(self) -> GreeterType:
		return GreeterType.Gdm


class GnomeMinimalProfile(DesktopProfile):
	def __init__(self) -> None:
		super().__init__('GNOME Minimal', description='GNOME (minimal with essential extensions)', minimal=True)

	@property
	@override
	def packages(self) -> list[str]:
		return [
			'gnome-shell',
			'gdm',
			'gnome-control-center',
			'gnome-terminal',
			'gnome-system-monitor',
			'gnome-calculator',
			'gnome-text-editor',
			'nautilus',
			'power-profiles-daemon',
			'xdg-desktop-portal-gnome',
			'gnome-keyring',
		]

	@property
	@override
	def aur_packages(self) -> list[str]:
		return [
			'gnome-shell-extension-appindicator',
			'gnome-shell-extension-gsconnect',
			'gnome-shell-extension-manager',
		]

	@property
	@override
	def default_greeter_type(self) -> GreeterType:
		return GreeterType.Gdm
