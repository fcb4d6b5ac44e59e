import re
from dataclasses import dataclass, field

from ..exceptions import SelectionError
from ..models.package_set import MenuEntry, PackageSetMenu
from ..output import debug, warn

_TOKEN_SEPARATORS = re.compile(r'[\s,]+')


@dataclass
class Selection:
	menu: PackageSetMenu
	packages: list[str] = field(default_factory=list)
	chosen: list[MenuEntry] = field(default_factory=list)
	ignored: list[str] = field(default_factory=list)
	skipped: bool = False
	everything: bool = False

	def is_empty(self) -> bool:
		return not self.packages

	def chosen_names(self) -> list[str]:
		return [entry.package_set.name for entry in self.chosen]


def parse_tokens(text: str | None) -> list[str]:
	"""
	Splits a free-form answer such as ``"1 3, 4"`` into tokens.
	"""
	if not text:
		return []

	return [token for token in _TOKEN_SEPARATORS.split(text.strip()) if token]


def resolve_selection(menu: PackageSetMenu, tokens: list[str]) -> Selection:
	"""
	Maps the tokens a user typed for ``menu`` to an ordered, deduplicated
	list of packages.

	Tokens are processed left to right. The skip sentinel discards anything
	selected so far and ends processing, the all sentinel expands to every
	defined set and ends processing. Unknown tokens are recorded in
	``Selection.ignored`` and otherwise have no effect. A single choice menu
	only honours the first token it recognises.
	"""
	selection = Selection(menu)

	for token in tokens:
		if menu.skip_token is not None and token == menu.skip_token:
			selection.packages = []
			selection.chosen = []
			selection.skipped = True
			break

		if menu.all_token is not None and token == menu.all_token:
			selection.chosen = list(menu.entries)
			selection.packages = menu.all_packages()
			selection.everything = True
			break

		entry = menu.get(token)
		if entry is None:
			selection.ignored.append(token)
			continue

		if entry not in selection.chosen:
			selection.chosen.append(entry)

		for package in entry.package_set:
			if package not in selection.packages:
				selection.packages.append(package)

		if not menu.multi:
			break

	if selection.ignored:
		warn(f'Ignoring unknown choice(s) for "{menu.title}": {", ".join(selection.ignored)}')

	debug(f'Resolved "{menu.title}" {tokens} to {selection.packages}')

	return selection


def validate_tokens(menu: PackageSetMenu, tokens: list[str]) -> None:
	"""
	Strict check used for answers supplied up front, before any step runs.
	"""
	unknown = [token for token in tokens if not menu.is_known(token)]

	if unknown:
		valid = ', '.join(token for token, _ in menu.options())
		raise SelectionError(f'Invalid choice(s) {", ".join(unknown)} for "{menu.title}", expected one of: {valid}')

	if not menu.multi and len(tokens) > 1:
		raise SelectionError(f'"{menu.title}" accepts a single choice, got: {", ".join(tokens)}')
