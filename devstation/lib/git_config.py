from .general import SysCommand
from .output import info


def configure_git(name: str | None, email: str | None, dry_run: bool = False) -> list[str]:
	"""
	Sets the global git identity. Empty answers are skipped so an
	existing identity is never overwritten with nothing.
	"""
	configured = []

	for key, value in (('user.name', name), ('user.email', email)):
		if not value:
			continue

		SysCommand(['git', 'config', '--global', key, value], dry_run=dry_run)
		configured.append(key)

	if configured:
		info(f'Configured git {", ".join(configured)}')

	return configured
