import logging
import os
import sys
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import TextIO


class Logger:
	def __init__(self, path: Path = Path('~/.cache/devstation').expanduser()) -> None:
		self._path = path

	@property
	def path(self) -> Path:
		return self._path / 'install.log'

	@property
	def directory(self) -> Path:
		return self._path

	def set_directory(self, path: Path) -> None:
		self._path = path.expanduser()

	def _check_permissions(self) -> None:
		log_file = self.path

		try:
			self._path.mkdir(exist_ok=True, parents=True)
			log_file.touch(exist_ok=True)

			with log_file.open('a') as f:
				f.write('')
		except PermissionError:
			# Fallback to creating the log file in the current folder
			self._path = Path('./').absolute()

			warn(f'Not enough permission to place log file at {log_file}, creating it in {self.path} instead')

	def log(self, level: int, content: str) -> None:
		self._check_permissions()

		with self.path.open('a') as f:
			ts = _timestamp()
			level_name = logging.getLevelName(level)
			f.write(f'[{ts}] - {level_name} - {content}\n')


logger = Logger()

_show_debug = False


def set_debug(enabled: bool) -> None:
	global _show_debug
	_show_debug = enabled


def _supports_color(stream: TextIO = sys.stdout) -> bool:
	"""
	Return True if the running system's terminal supports color,
	and False otherwise.
	"""
	supported_platform = sys.platform != 'win32' or 'ANSICON' in os.environ

	is_a_tty = hasattr(stream, 'isatty') and stream.isatty()
	return supported_platform and is_a_tty and 'NO_COLOR' not in os.environ


class Font(Enum):
	bold = '1'


def _stylize_output(
	text: str,
	fg: str,
	bg: str | None,
	reset: bool,
	font: list[Font] = [],
) -> str:
	"""
	Adds styling to a text given a set of color arguments.
	"""
	colors = {
		'black': '0',
		'red': '1',
		'green': '2',
		'yellow': '3',
		'blue': '4',
		'magenta': '5',
		'cyan': '6',
		'white': '7',
		'orange': '8;5;208',
		'gray': '8;5;246',
		'grey': '8;5;246',
	}

	foreground = {key: f'3{colors[key]}' for key in colors}
	background = {key: f'4{colors[key]}' for key in colors}
	code_list = []

	if text == '' and reset:
		return '\x1b[0m'

	code_list.append(foreground[str(fg)])

	if bg:
		code_list.append(background[str(bg)])

	for o in font:
		code_list.append(o.value)

	ansi = ';'.join(code_list)

	return f'\033[{ansi}m{text}\033[0m'


def _timestamp() -> str:
	now = datetime.now()
	return now.strftime('%Y-%m-%d %H:%M:%S')


def info(
	*msgs: str,
	level: int = logging.INFO,
	fg: str = 'green',
	bg: str | None = None,
	reset: bool = False,
	font: list[Font] = [],
) -> None:
	log(*msgs, level=level, fg=fg, bg=bg, reset=reset, font=font)


def debug(
	*msgs: str,
	level: int = logging.DEBUG,
	fg: str = 'gray',
	bg: str | None = None,
	reset: bool = False,
	font: list[Font] = [],
) -> None:
	log(*msgs, level=level, fg=fg, bg=bg, reset=reset, font=font)


def error(
	*msgs: str,
	level: int = logging.ERROR,
	fg: str = 'red',
	bg: str | None = None,
	reset: bool = False,
	font: list[Font] = [],
) -> None:
	log(*msgs, level=level, fg=fg, bg=bg, reset=reset, font=font)


def warn(
	*msgs: str,
	level: int = logging.WARNING,
	fg: str = 'yellow',
	bg: str | None = None,
	reset: bool = False,
	font: list[Font] = [],
) -> None:
	log(*msgs, level=level, fg=fg, bg=bg, reset=reset, font=font)


def success(*msgs: str) -> None:
	log(*msgs, level=logging.INFO, fg='green', font=[Font.bold])


def header(title: str) -> None:
	"""
	Prints a framed section title, used between the major
	steps of a provisioning script.
	"""
	width = max(78, len(title) + 4)
	border = '═' * width

	logger.log(logging.INFO, f'== {title} ==')

	for line in ('', f'╔{border}╗', f'║ {title.ljust(width - 2)} ║', f'╚{border}╝', ''):
		if line and _supports_color():
			line = _stylize_output(line, 'cyan', None, False)
		print(line)


def log(
	*msgs: str,
	level: int = logging.INFO,
	fg: str = 'white',
	bg: str | None = None,
	reset: bool = False,
	font: list[Font] = [],
) -> None:
	text = ' '.join([str(x) for x in msgs])

	logger.log(level, text)

	if level == logging.DEBUG and not _show_debug:
		return

	stream = sys.stderr if level >= logging.ERROR else sys.stdout

	if level == logging.WARNING:
		text = f'[WARNING] {text}'
	elif level >= logging.ERROR:
		text = f'[ERROR] {text}'
	else:
		text = f'[{_timestamp()}] {text}'

	# Attempt to colorize the output if supported
	if _supports_color(stream):
		text = _stylize_output(text, fg, bg, reset, font)

	print(text, file=stream)
