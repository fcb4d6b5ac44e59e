from .general import SysCommand
from .output import info

FLATHUB_URL = 'https://dl.flathub.org/repo/flathub.flatpakrepo'


class Flatpak:
	def __init__(self, system: bool = False, dry_run: bool = False, silent: bool = False) -> None:
		self.system = system
		self.dry_run = dry_run
		self.silent = silent

	def _cmd(self, *args: str) -> list[str]:
		cmd = ['flatpak', *args]
		return ['sudo', *cmd] if self.system else cmd

	def add_remote(self, name: str = 'flathub', url: str = FLATHUB_URL) -> None:
		info(f'Adding {name} repository...')
		SysCommand(self._cmd('remote-add', '--if-not-exists', name, url), dry_run=self.dry_run)

	def install(self, app_ids: str | list[str], remote: str = 'flathub') -> None:
		if isinstance(app_ids, str):
			app_ids = [app_ids]

		if not app_ids:
			return

		info(f'Installing Flatpak applications: {" ".join(app_ids)}')
		SysCommand(
			self._cmd('install', '-y', '--noninteractive', remote, *app_ids),
			peek_output=not self.silent,
			dry_run=self.dry_run,
		)

	def uninstall_unused(self) -> None:
		SysCommand(self._cmd('uninstall', '--unused', '-y'), dry_run=self.dry_run)
