import subprocess
import threading
from types import TracebackType

from .exceptions import RequirementError
from .general import binary_exists
from .hardware import SysInfo
from .output import debug, info


def check_privileges() -> None:
	"""
	The scripts provision the invoking user's account and escalate
	through sudo per command, so they must not be started as root.
	"""
	if SysInfo.is_root():
		raise RequirementError('This script should not be run as root. Please run as a regular user.')

	if not binary_exists('sudo'):
		raise RequirementError('sudo is required but not installed')


class SudoKeepAlive:
	"""
	Asks for the sudo password once and keeps the credential cache warm
	from a daemon thread, so long steps never trigger a second prompt.
	"""

	def __init__(self, interval: float = 60, enabled: bool = True) -> None:
		self.interval = interval
		self.enabled = enabled
		self._stop = threading.Event()
		self._thread: threading.Thread | None = None

	def __enter__(self) -> 'SudoKeepAlive':
		self.start()
		return self

	def __exit__(
		self,
		exc_type: type[BaseException] | None,
		exc_value: BaseException | None,
		traceback: TracebackType | None,
	) -> None:
		self.stop()

	def _refresh(self) -> None:
		while not self._stop.wait(self.interval):
			subprocess.run(['sudo', '-n', 'true'], stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL, check=False)

	def start(self) -> None:
		if not self.enabled:
			return

		info('Requesting sudo privileges...')
		if subprocess.run(['sudo', '-v'], check=False).returncode != 0:
			raise RequirementError('Could not obtain sudo privileges')

		self._stop.clear()
		self._thread = threading.Thread(target=self._refresh, name='sudo-keepalive', daemon=True)
		self._thread.start()
		debug('Started sudo keep-alive')

	def stop(self) -> None:
		self._stop.set()

		if self._thread is not None:
			self._thread.join(timeout=1)
			self._thread = None

	@property
	def running(self) -> bool:
		return self._thread is not None and self._thread.is_alive()
