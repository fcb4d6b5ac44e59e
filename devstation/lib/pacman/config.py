import os
import re
from pathlib import Path

from ..general import SysCommand
from ..output import debug, info


class PacmanConfig:
	def __init__(self, config_path: Path = Path('/etc/pacman.conf'), dry_run: bool = False):
		self._config_path = config_path
		self._repositories: list[str] = []
		self.dry_run = dry_run

	def enable(self, repo: str | list[str]) -> None:
		if not isinstance(repo, list):
			repo = [repo]

		self._repositories += repo

	def is_enabled(self, repo: str) -> bool:
		content = self._config_path.read_text()
		return re.search(rf'^\[{re.escape(repo)}\]\s*$', content, flags=re.MULTILINE) is not None

	def render(self) -> str:
		content = self._config_path.read_text().splitlines(keepends=True)

		for row, line in enumerate(content):
			# Check if this is a commented repository section that needs to be enabled
			match = re.match(r'^#\s*\[(.*)\]', line)

			if match and match.group(1) in self._repositories:
				content[row] = re.sub(r'^#\s*', '', line)

				# also uncomment the Include statement that belongs to the section
				if row + 1 < len(content) and content[row + 1].lstrip().startswith('#'):
					content[row + 1] = re.sub(r'^#\s*', '', content[row + 1])

		return ''.join(content)

	def apply(self) -> bool:
		"""
		Enables the requested repositories. Returns False when nothing had
		to change, which is the case on every run after the first.
		"""
		if not self._repositories:
			return False

		pending = [repo for repo in self._repositories if not self.is_enabled(repo)]
		if not pending:
			debug(f'Repositories already enabled: {", ".join(self._repositories)}')
			return False

		info(f'Enabling repositories in {self._config_path}: {", ".join(pending)}')
		content = self.render()

		if self.dry_run:
			return True

		if os.access(self._config_path, os.W_OK):
			self._config_path.write_text(content)
		else:
			SysCommand(['sudo', 'tee', str(self._config_path)], input_data=content.encode())

		return True
