import os
import platform
from enum import Enum
from functools import cached_property
from pathlib import Path

from .output import debug


class Distro(Enum):
	Arch = 'arch'
	Debian = 'debian'
	Unknown = 'unknown'

	@classmethod
	def from_os_release(cls, os_release: dict[str, str]) -> 'Distro':
		ids = [os_release.get('ID', '')] + os_release.get('ID_LIKE', '').split()

		for distro_id in ids:
			match distro_id:
				case 'arch' | 'archarm' | 'endeavouros' | 'manjaro':
					return Distro.Arch
				case 'debian':
					return Distro.Debian

		return Distro.Unknown


class CpuVendor(Enum):
	AuthenticAMD = 'amd'
	GenuineIntel = 'intel'
	_Unknown = 'unknown'

	@classmethod
	def get_vendor(cls, name: str) -> 'CpuVendor':
		if vendor := getattr(cls, name, None):
			return vendor
		else:
			debug(f"Unknown CPU vendor '{name}' detected.")
			return cls._Unknown


class _SysInfo:
	def __init__(self, os_release_path: Path = Path('/etc/os-release'), cpu_info_path: Path = Path('/proc/cpuinfo')) -> None:
		self._os_release_path = os_release_path
		self._cpu_info_path = cpu_info_path

	@cached_property
	def os_release(self) -> dict[str, str]:
		release: dict[str, str] = {}

		try:
			content = self._os_release_path.read_text()
		except FileNotFoundError:
			return release

		for line in content.splitlines():
			if '=' not in line or line.startswith('#'):
				continue
			key, value = line.split('=', maxsplit=1)
			release[key.strip()] = value.strip().strip('"\'')

		return release

	@cached_property
	def cpu_info(self) -> dict[str, str]:
		"""
		Returns system cpu information
		"""
		cpu: dict[str, str] = {}

		try:
			with self._cpu_info_path.open() as file:
				for line in file:
					if (line := line.strip()) and ':' in line:
						key, value = line.split(':', maxsplit=1)
						cpu[key.strip()] = value.strip()
		except FileNotFoundError:
			pass

		return cpu


_sys_info = _SysInfo()


class SysInfo:
	@staticmethod
	def distro() -> Distro:
		return Distro.from_os_release(_sys_info.os_release)

	@staticmethod
	def version_codename() -> str | None:
		return _sys_info.os_release.get('VERSION_CODENAME')

	@staticmethod
	def version_id() -> str | None:
		return _sys_info.os_release.get('VERSION_ID')

	@staticmethod
	def pretty_name() -> str:
		return _sys_info.os_release.get('PRETTY_NAME', platform.system())

	@staticmethod
	def cpu_vendor() -> CpuVendor | None:
		if vendor := _sys_info.cpu_info.get('vendor_id'):
			return CpuVendor.get_vendor(vendor)
		return None

	@staticmethod
	def cpu_model() -> str | None:
		return _sys_info.cpu_info.get('model name', None)

	@staticmethod
	def is_root() -> bool:
		return os.geteuid() == 0

	@staticmethod
	def machine() -> str:
		return platform.machine()
