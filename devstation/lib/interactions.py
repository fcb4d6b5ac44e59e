import re

from .exceptions import RequirementError
from .models.package_set import PackageSetMenu
from .output import log
from .packages.selector import Selection, parse_tokens, resolve_selection


def _read_line(prompt: str) -> str | None:
	"""
	Reads one answer, None once stdin is closed
	"""
	try:
		return input(prompt)
	except EOFError:
		print()
		return None


def print_menu(menu: PackageSetMenu) -> None:
	print()
	print(f'{menu.title}:')

	for token, label in menu.options():
		print(f'{token}) {label}')


def generic_select(menu: PackageSetMenu, input_text: str | None = None) -> Selection:
	"""
	Prints ``menu`` and reads a single choice. Unlike a multi select, a single
	choice menu has no sensible "nothing" answer, so the user is asked again
	until the answer matches an entry (or the default, on empty input).
	"""
	input_text = input_text or menu.prompt or f'Enter your choice ({menu.tokens[0]}-{menu.tokens[-1]}): '

	print_menu(menu)

	while True:
		line = _read_line(input_text)

		if line is None and menu.default is None:
			raise RequirementError(f'No answer for "{menu.title}", input is closed')

		try:
			answer = (line or '').strip()

			if not answer:
				if menu.default is not None:
					answer = menu.default
				else:
					raise RequirementError('Please select an option to continue')

			if not menu.is_known(answer):
				raise RequirementError(f'Selected option "{answer}" does not exist in available options')

			return resolve_selection(menu, [answer])
		except RequirementError as err:
			log(f' * {err} * ', fg='red')


def generic_multi_select(menu: PackageSetMenu, input_text: str | None = None) -> Selection:
	"""
	Prints ``menu`` and reads one line of space separated choices, e.g. ``1 3 4``.
	An empty answer selects the default, if any, otherwise nothing.
	"""
	input_text = input_text or menu.prompt or 'Enter your choices separated by spaces (e.g., 1 3 4): '

	print_menu(menu)

	tokens = parse_tokens(_read_line(input_text) or '')

	if not tokens and menu.default is not None:
		tokens = [menu.default]

	return resolve_selection(menu, tokens)


def select(menu: PackageSetMenu) -> Selection:
	if menu.multi:
		return generic_multi_select(menu)
	return generic_select(menu)


def ask_yes_no(prompt: str, default: bool = False) -> bool:
	answer = (_read_line(prompt) or '').strip().lower()

	if not answer:
		return default

	return re.match(r'^(y|yes)$', answer) is not None


def ask_text(prompt: str) -> str:
	return (_read_line(prompt) or '').strip()
