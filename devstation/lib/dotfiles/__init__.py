from pathlib import Path

from ..output import debug, info
from .templates import KITTY_NORD, STARSHIP_CATPPUCCIN, desktop_entry, vscode_laravel_entry
from .zshrc import (
	ZshrcConfig,
	arch_dev_zshrc,
	arch_enhanced_zshrc,
	arch_minimal_zshrc,
	arch_workstation_zshrc,
	debian_zshrc,
)


def write_dotfile(path: Path, content: str, mode: int | None = None) -> bool:
	"""
	Writes ``content`` to ``path``, creating parent directories. An
	unchanged file is left untouched and False is returned.
	"""
	path = path.expanduser()

	if path.exists() and path.read_text() == content:
		debug(f'{path} is up to date')
		return False

	path.parent.mkdir(parents=True, exist_ok=True)
	path.write_text(content)

	if mode is not None:
		path.chmod(mode)

	info(f'Wrote {path}')
	return True


__all__ = [
	'KITTY_NORD',
	'STARSHIP_CATPPUCCIN',
	'ZshrcConfig',
	'arch_dev_zshrc',
	'arch_enhanced_zshrc',
	'arch_minimal_zshrc',
	'arch_workstation_zshrc',
	'debian_zshrc',
	'desktop_entry',
	'vscode_laravel_entry',
	'write_dotfile',
]
