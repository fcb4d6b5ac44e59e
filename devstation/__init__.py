"""Linux developer workstation provisioning - Arch Linux and Debian."""

import importlib
import sys
import traceback

from .lib.args import SCRIPTS, ConfigHandler
from .lib.exceptions import SelectionError
from .lib.hardware import Distro, SysInfo
from .lib.output import debug, error, info, logger, warn


def _log_sys_info() -> None:
	# Log the host before starting, this might assist in troubleshooting
	debug(f'Distribution detected: {SysInfo.pretty_name()} ({SysInfo.distro().value})')
	debug(f'Processor model detected: {SysInfo.cpu_model()} ({SysInfo.cpu_vendor()})')
	debug(f'Machine: {SysInfo.machine()}')


def _check_distro(expected: Distro) -> None:
	detected = SysInfo.distro()

	if detected != expected:
		warn(f'This script targets {expected.value}, but {detected.value} was detected. Continuing anyway...')


def main() -> int:
	"""
	This can either be run as the installed application: devstation
	OR straight as a module: python -m devstation
	In any case we will be attempting to load the provided script to be run from the scripts/ folder
	"""
	handler = ConfigHandler()

	if handler.args.list_scripts:
		for script in SCRIPTS:
			print(script)
		return 0

	_log_sys_info()

	script = handler.get_script()
	info(f'Running script {script}' + (' (dry run)' if handler.args.dry_run else ''))

	mod_name = f'devstation.scripts.{script}'
	module = importlib.import_module(mod_name)

	_check_distro(module.DISTRO)
	module.perform_installation(handler)

	return 0


def run_as_a_module() -> None:
	rc = 0
	exc = None

	try:
		rc = main()
	except SelectionError as e:
		error(str(e))
		rc = 2
	except KeyboardInterrupt:
		warn('Interrupted by user')
		rc = 130
	except Exception as e:
		exc = e
	finally:
		if exc:
			err = ''.join(traceback.format_exception(exc))
			error(err)

			warn(f'Devstation experienced the above error. The full log is available at "{logger.path}".')
			rc = 1

		sys.exit(rc)


__all__ = [
	'main',
	'run_as_a_module',
]
