from typing import override

from ..profile import DesktopProfile, GreeterType


class PlasmaProfile(DesktopProfile):
	def __init__(self) -> None:
		super().__init__('KDE Plasma', description='KDE Plasma (full group)')

	@property
	@override
	def packages(self) -> list[str]:
		return [
			'plasma',
			'kde-applications',
			'power-profiles-daemon',
		]

	@property
	@override
	def default_greeter_type(self) -> GreeterType:
		return GreeterType.Sddm


class PlasmaMinimalProfile(DesktopProfile):
	def __init__(self) -> None:
		super().__init__('KDE Plasma Minimal', description='KDE Plasma (minimal desktop)', minimal=True)

	@property
	@override
	def packages(self) -> list[str]:
		return [
			'plasma-desktop',
			'plasma-nm',
			'plasma-pa',
			'konsole',
			'dolphin',
			'kate',
			'kcalc',
			'sddm',
			'power-profiles-daemon',
			'xdg-desktop-portal-kde',
		]

	@property
	@override
	def default_greeter_type(self) -> GreeterType:
		return GreeterType.Sddm
