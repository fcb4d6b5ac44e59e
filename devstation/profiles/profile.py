from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from ..lib.models.package_set import PackageSet

if TYPE_CHECKING:
	from ..lib.installer import Provisioner


class ProfileType(Enum):
	DesktopEnv = 'Desktop Environment'
	MinimalDesktopEnv = 'Minimal Desktop Environment'


class GreeterType(Enum):
	Lightdm = 'lightdm'
	Sddm = 'sddm'
	Gdm = 'gdm'


class Profile:
	def __init__(
		self,
		name: str,
		profile_type: ProfileType,
		description: str = '',
		packages: list[str] = [],
		services: list[str] = [],
	) -> None:
		self.name = name
		self.profile_type = profile_type
		self.description = description

		self._packages = packages
		self._services = services

	@property
	def packages(self) -> list[str]:
		"""
		Returns a list of packages that should be installed when
		this profile is the chosen one
		"""
		return self._packages

	@property
	def aur_packages(self) -> list[str]:
		"""
		Packages of this profile that only exist in the AUR
		"""
		return []

	@property
	def services(self) -> list[str]:
		"""
		Returns a list of services that should be enabled when
		this profile is the chosen one, the display manager included
		"""
		services = list(self._services)

		if greeter := self.default_greeter_type:
			services.insert(0, greeter.value)

		return services

	@property
	def default_greeter_type(self) -> GreeterType | None:
		return None

	def as_package_set(self) -> PackageSet:
		return PackageSet(self.name, tuple(self.packages), description=self.description)

	def install(self, provisioner: 'Provisioner') -> None:
		"""
		Performs installation steps when this profile was selected
		"""
		provisioner.add_additional_packages(self.packages)

		if self.aur_packages:
			provisioner.add_aur_packages(self.aur_packages)

		provisioner.enable_service(self.services)

	def json(self) -> dict[str, str | list[str]]:
		return {
			'name': self.name,
			'type': self.profile_type.value,
			'packages': self.packages,
			'services': self.services,
		}


class DesktopProfile(Profile):
	def __init__(self, name: str, description: str = '', minimal: bool = False) -> None:
		super().__init__(
			name,
			ProfileType.MinimalDesktopEnv if minimal else ProfileType.DesktopEnv,
			description=description,
			services=['power-profiles-daemon'],
		)
