import tempfile
from pathlib import Path
from typing import override

from ..download import fetch
from ..exceptions import SysCallError
from ..general import SysCommand
from ..output import debug, info, warn
from ..package_manager import PackageManager


class Apt(PackageManager):
	name = 'apt'

	def __init__(
		self,
		dry_run: bool = False,
		silent: bool = False,
		sources_dir: Path = Path('/etc/apt/sources.list.d'),
		keyring_dir: Path = Path('/etc/apt/keyrings'),
	) -> None:
		super().__init__(dry_run=dry_run, silent=silent)
		self.sources_dir = sources_dir
		self.keyring_dir = keyring_dir

	@override
	def run(self, args: list[str], peek_output: bool = True) -> SysCommand:
		# sudo resets the environment, so the frontend has to be passed through env
		return SysCommand(
			['sudo', 'env', 'DEBIAN_FRONTEND=noninteractive', self.name, *args],
			peek_output=peek_output and not self.silent,
			dry_run=self.dry_run,
		)

	@override
	def update(self) -> None:
		info('Refreshing package lists...')
		self.run(['update'])
		self.synced = True

	@override
	def upgrade(self) -> None:
		if not self.synced:
			self.update()
		info('Updating system packages...')
		self.run(['upgrade', '-y'])

	@override
	def _install(self, packages: list[str]) -> None:
		self.run(['install', '-y', *packages])

	@override
	def _remove(self, packages: list[str]) -> None:
		self.run(['remove', '-y', *packages])

	@override
	def autoremove(self) -> None:
		self.run(['autoremove', '-y'])

	@override
	def clean(self) -> None:
		self.run(['autoclean'])

	def install_deb(self, path: Path) -> None:
		"""
		Installs a downloaded .deb archive; missing dependencies are
		pulled in afterwards with ``apt install -f``.
		"""
		info(f'Installing {path.name}')

		try:
			SysCommand(['sudo', 'dpkg', '-i', str(path)], peek_output=not self.silent, dry_run=self.dry_run)
		except SysCallError as err:
			warn(f'dpkg reported unmet dependencies for {path.name}, fixing them: {err.exit_code}')
			self.run(['install', '-f', '-y'])

	def keyring_path(self, name: str) -> Path:
		return self.keyring_dir / f'{name}.gpg'

	def source_path(self, name: str) -> Path:
		return self.sources_dir / f'{name}.list'

	def add_repository(self, name: str, key_url: str, deb_line: str) -> bool:
		"""
		Adds a third party repository signed with the armored key at
		``key_url``. ``deb_line`` may reference the keyring as ``{keyring}``.

		Returns False if the repository was already configured.
		"""
		source_file = self.source_path(name)
		keyring = self.keyring_path(name)
		entry = deb_line.format(keyring=keyring) + '\n'

		if source_file.exists() and source_file.read_text() == entry and keyring.exists():
			debug(f'Repository {name} already configured')
			return False

		info(f'Adding apt repository {name}')

		if self.dry_run:
			SysCommand(['sudo', 'tee', str(source_file)], dry_run=True)
			return True

		armored = fetch(key_url)
		dearmored = SysCommand(['gpg', '--dearmor'], input_data=armored).output(remove_cr=False)

		with tempfile.NamedTemporaryFile(prefix=f'{name}-', suffix='.gpg') as tmp:
			tmp.write(dearmored)
			tmp.flush()
			SysCommand(['sudo', 'install', '-D', '-o', 'root', '-g', 'root', '-m', '644', tmp.name, str(keyring)])

		SysCommand(['sudo', 'tee', str(source_file)], input_data=entry.encode())

		self.synced = False
		return True


__all__ = [
	'Apt',
]
