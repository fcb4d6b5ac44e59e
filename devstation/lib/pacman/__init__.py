import time
from pathlib import Path
from typing import override

from ..exceptions import RequirementError, SysCallError
from ..general import SysCommand
from ..output import debug, error, info, warn
from ..package_manager import PackageManager
from .config import PacmanConfig


class Pacman(PackageManager):
	name = 'pacman'

	def __init__(
		self,
		dry_run: bool = False,
		silent: bool = False,
		db_lock: Path = Path('/var/lib/pacman/db.lck'),
		lock_timeout: float = 60 * 10,
	) -> None:
		super().__init__(dry_run=dry_run, silent=silent)
		self.db_lock = db_lock
		self.lock_timeout = lock_timeout

	def wait_for_lock(self) -> None:
		"""
		Protects us from colliding with other running pacman sessions.
		The grace period is 10 minutes before giving up.
		"""
		if self.db_lock.exists():
			warn('Pacman is already running, waiting maximum 10 minutes for it to terminate.')

		started = time.time()
		while self.db_lock.exists():
			time.sleep(0.25)

			if time.time() - started > self.lock_timeout:
				error('Pre-existing pacman lock never exited. Please clean up any existing pacman sessions first.')
				raise RequirementError(f'Pacman database is locked: {self.db_lock}')

	@override
	def run(self, args: list[str], peek_output: bool = True) -> SysCommand:
		self.wait_for_lock()
		return super().run(args, peek_output=peek_output)

	@override
	def update(self) -> None:
		if self.synced:
			return
		info('Synchronizing package databases...')
		self.run(['-Sy', '--noconfirm'])
		self.synced = True

	@override
	def upgrade(self) -> None:
		info('Updating system packages...')
		self.run(['-Syu', '--noconfirm'])
		self.synced = True

	@override
	def _install(self, packages: list[str]) -> None:
		self.run(['-S', '--needed', '--noconfirm', *packages])

	@override
	def _remove(self, packages: list[str]) -> None:
		self.run(['-Rns', '--noconfirm', *packages])

	def orphans(self) -> list[str]:
		# pacman -Qtdq exits with 1 when there is nothing to report
		try:
			output = SysCommand(['pacman', '-Qtdq'], dry_run=self.dry_run)
		except SysCallError:
			return []

		return [line.decode().strip() for line in output if line.strip()]

	@override
	def autoremove(self) -> None:
		if orphans := self.orphans():
			self.remove(orphans)
		else:
			debug('No orphaned packages to remove')

	@override
	def clean(self) -> None:
		info('Clearing package cache...')
		self.run(['-Sc', '--noconfirm'])

	def enable_multilib(self, config: PacmanConfig | None = None) -> None:
		config = config or PacmanConfig(dry_run=self.dry_run)
		config.enable('multilib')

		if config.apply():
			# the database has to know about the new repository
			self.synced = False
			self.update()


__all__ = [
	'Pacman',
	'PacmanConfig',
]
