from __future__ import annotations

import os
import re
import shlex
import stat
import subprocess
import sys
import time
from collections.abc import Iterator
from pathlib import Path
from shutil import which
from typing import override

from .exceptions import RequirementError, SysCallError
from .output import debug, logger

_VT100_ESCAPE_REGEX = r'\x1B\[[?0-9;]*[a-zA-Z]'
_VT100_ESCAPE_REGEX_BYTES = _VT100_ESCAPE_REGEX.encode()


def locate_binary(name: str) -> str:
	if path := which(name):
		return path
	raise RequirementError(f'Binary {name} does not exist.')


def binary_exists(name: str) -> bool:
	return which(name) is not None


def clear_vt100_escape_codes(data: bytes) -> bytes:
	return re.sub(_VT100_ESCAPE_REGEX_BYTES, b'', data)


class SysCommand:
	"""
	Runs a single external command to completion.

	The output is captured into a trace log which can be iterated line by line
	or decoded as a whole. With ``peek_output=True`` the output is also echoed
	to the terminal while the command runs, which is how long package manager
	transactions stay visible to the user.

	A non-zero exit code raises :class:`SysCallError`, a missing binary raises
	:class:`RequirementError`. With ``dry_run=True`` the command is only logged.
	"""

	def __init__(
		self,
		cmd: str | list[str],
		peek_output: bool = False,
		environment_vars: dict[str, str] | None = None,
		working_directory: str | Path | None = None,
		input_data: bytes | None = None,
		dry_run: bool = False,
		remove_vt100_escape_codes_from_lines: bool = True,
	):
		if isinstance(cmd, str):
			cmd = shlex.split(cmd)

		self.cmd = list(cmd)
		self.peek_output = peek_output
		self.environment_vars = environment_vars or {}
		self.working_directory = working_directory
		self.input_data = input_data
		self.dry_run = dry_run
		self.remove_vt100_escape_codes_from_lines = remove_vt100_escape_codes_from_lines

		self.exit_code: int | None = None
		self.started: float | None = None
		self.ended: float | None = None
		self._trace_log = b''

		self.execute()

	def __iter__(self) -> Iterator[bytes]:
		for line in filter(None, self._trace_log.splitlines()):
			if self.remove_vt100_escape_codes_from_lines:
				line = clear_vt100_escape_codes(line)

			yield line + b'\n'

	@override
	def __repr__(self) -> str:
		return f'SysCommand({self.cmd!r}, exit_code={self.exit_code})'

	@override
	def __str__(self) -> str:
		return self.decode()

	def execute(self) -> None:
		if self.dry_run:
			debug(f'[dry-run] {shlex.join(self.cmd)}')
			self.exit_code = 0
			return

		if self.cmd and not self.cmd[0].startswith(('/', './')):
			self.cmd[0] = locate_binary(self.cmd[0])

		_log_cmd(self.cmd)
		self.started = time.time()

		with subprocess.Popen(
			self.cmd,
			stdin=subprocess.PIPE if self.input_data is not None else None,
			stdout=subprocess.PIPE,
			stderr=subprocess.STDOUT,
			cwd=self.working_directory,
			env={**os.environ, **self.environment_vars},
		) as process:
			if self.input_data is not None and process.stdin:
				process.stdin.write(self.input_data)
				process.stdin.close()

			if process.stdout:
				for chunk in iter(lambda: process.stdout.read1(8192), b''):  # type: ignore[union-attr]
					self._trace_log += chunk
					self.peak(chunk)

			self.exit_code = process.wait()

		self.ended = time.time()

		if self.peek_output:
			sys.stdout.write('\n')
			sys.stdout.flush()

		if self.exit_code != 0:
			raise SysCallError(
				f'{self.cmd} exited with abnormal exit code [{self.exit_code}]: {self.decode()[-500:]}',
				self.exit_code,
				worker_log=self._trace_log,
			)

	def peak(self, output: bytes) -> None:
		if not self.peek_output:
			return

		try:
			text = output.decode('UTF-8')
		except UnicodeDecodeError:
			return

		sys.stdout.write(text)
		sys.stdout.flush()

	def decode(self, encoding: str = 'utf-8', errors: str = 'backslashreplace', strip: bool = True) -> str:
		val = self._trace_log.decode(encoding, errors=errors)

		if strip:
			return val.strip()
		return val

	def output(self, remove_cr: bool = True) -> bytes:
		if remove_cr:
			return self._trace_log.replace(b'\r\n', b'\n')

		return self._trace_log

	@property
	def trace_log(self) -> bytes:
		return self._trace_log


def _log_cmd(cmd: list[str]) -> None:
	history_logfile = logger.directory / 'cmd_history.txt'

	change_perm = False
	if history_logfile.exists() is False:
		change_perm = True

	try:
		with history_logfile.open('a') as cmd_log:
			cmd_log.write(f'{time.time()} {cmd}\n')

		if change_perm:
			history_logfile.chmod(stat.S_IRUSR | stat.S_IWUSR | stat.S_IRGRP)
	except (PermissionError, FileNotFoundError):
		# If history_logfile does not exist, ignore the error
		pass

