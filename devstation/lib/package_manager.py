from abc import ABC, abstractmethod

from .exceptions import PackageError, SysCallError
from .general import SysCommand
from .output import info, warn


class PackageManager(ABC):
	"""
	Common interface over the native package managers.

	Every operation is expected to be idempotent on the package manager's
	side: installing an installed package is a no-op.
	"""

	name: str = ''

	def __init__(self, dry_run: bool = False, silent: bool = False) -> None:
		self.dry_run = dry_run
		self.silent = silent
		self.synced = False

	def run(self, args: list[str], peek_output: bool = True) -> SysCommand:
		return SysCommand(['sudo', self.name, *args], peek_output=peek_output and not self.silent, dry_run=self.dry_run)

	@abstractmethod
	def update(self) -> None:
		"""
		Refreshes the package database
		"""

	@abstractmethod
	def upgrade(self) -> None:
		"""
		Upgrades every installed package
		"""

	@abstractmethod
	def _install(self, packages: list[str]) -> None: ...

	@abstractmethod
	def _remove(self, packages: list[str]) -> None: ...

	@abstractmethod
	def autoremove(self) -> None: ...

	@abstractmethod
	def clean(self) -> None: ...

	def install(self, packages: str | list[str]) -> None:
		if isinstance(packages, str):
			packages = [packages]

		packages = [p for p in packages if p]

		if not packages:
			return

		info(f'Installing packages: {" ".join(packages)}')

		try:
			self._install(packages)
		except SysCallError as err:
			raise PackageError(f'Could not install packages with {self.name}: {" ".join(packages)}') from err

	def remove(self, packages: str | list[str], tolerate_failure: bool = True) -> bool:
		"""
		Removes ``packages``. Removal is part of cleanup, so by default a
		failure (such as a package that was never installed) only warns.
		"""
		if isinstance(packages, str):
			packages = [packages]

		if not packages:
			return True

		info(f'Removing packages: {" ".join(packages)}')

		try:
			self._remove(packages)
		except SysCallError as err:
			if not tolerate_failure:
				raise
			warn(f'Could not remove some packages, continuing: {err.message}')
			return False

		return True
