import tempfile
from pathlib import Path

from .general import SysCommand, binary_exists
from .output import debug, info, success


class Paru:
	"""
	The AUR helper. Builds and installs community packages that are not
	part of the official repositories, bootstrapping itself on first use.
	"""

	binary = 'paru'

	def __init__(
		self,
		package: str = 'paru-bin',
		dry_run: bool = False,
		silent: bool = False,
	) -> None:
		self.package = package
		self.dry_run = dry_run
		self.silent = silent

	@property
	def repository_url(self) -> str:
		return f'https://aur.archlinux.org/{self.package}.git'

	def is_installed(self) -> bool:
		return binary_exists(self.binary)

	def bootstrap(self) -> bool:
		"""
		Builds the helper from the AUR with makepkg. Does nothing if it is
		already on the PATH, and returns whether a build took place.
		"""
		if self.is_installed():
			info('Paru already installed')
			return False

		info('Installing Paru AUR helper...')

		with tempfile.TemporaryDirectory(prefix='devstation-aur-') as tmp:
			build_dir = Path(tmp) / self.package

			SysCommand(['git', 'clone', self.repository_url, str(build_dir)], dry_run=self.dry_run)
			SysCommand(
				['makepkg', '-si', '--noconfirm'],
				working_directory=build_dir if not self.dry_run else None,
				peek_output=not self.silent,
				dry_run=self.dry_run,
			)

		success('Paru installed successfully')
		return True

	def install(self, packages: str | list[str]) -> None:
		if isinstance(packages, str):
			packages = [packages]

		if not packages:
			return

		info(f'Installing AUR packages: {" ".join(packages)}')
		SysCommand(
			[self.binary, '-S', '--needed', '--noconfirm', *packages],
			peek_output=not self.silent,
			dry_run=self.dry_run,
		)

	def clean(self) -> None:
		debug('Clearing AUR build cache')
		SysCommand([self.binary, '-Sc', '--noconfirm'], dry_run=self.dry_run)
