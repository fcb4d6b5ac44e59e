class RequirementError(Exception):
	pass


class SysCallError(Exception):
	def __init__(self, message: str, exit_code: int | None = None, worker_log: bytes = b'') -> None:
		super().__init__(message)
		self.message = message
		self.exit_code = exit_code
		self.worker_log = worker_log


class ServiceException(Exception):
	pass


class PackageError(Exception):
	pass


class DownloadError(Exception):
	def __init__(self, url: str, reason: str) -> None:
		super().__init__(f'Could not download {url}: {reason}')
		self.url = url
		self.reason = reason


class SelectionError(Exception):
	"""
	Raised when a menu selection given up front (configuration file)
	references a choice that the menu does not define.
	"""
