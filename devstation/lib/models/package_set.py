from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class PackageSource(Enum):
	Native = 'native'
	Aur = 'aur'
	Flatpak = 'flatpak'


@dataclass(frozen=True)
class PackageSet:
	name: str
	packages: tuple[str, ...]
	description: str = ''
	source: PackageSource = PackageSource.Native

	def __post_init__(self) -> None:
		# allow passing a list for convenience, but keep it immutable
		object.__setattr__(self, 'packages', tuple(self.packages))

	def __len__(self) -> int:
		return len(self.packages)

	def __iter__(self) -> Iterator[str]:
		return iter(self.packages)

	def json(self) -> dict[str, str | list[str]]:
		return {
			'name': self.name,
			'description': self.description,
			'source': self.source.value,
			'packages': list(self.packages),
		}


@dataclass(frozen=True)
class MenuEntry:
	token: str
	label: str
	package_set: PackageSet


@dataclass(frozen=True)
class PackageSetMenu:
	"""
	A static enumeration of package sets offered to the user, addressed
	by the token the user types (usually the number printed in front of
	the entry).

	``all_token`` and ``skip_token`` are optional sentinels, expanding
	to every defined set or to nothing respectively.
	"""

	title: str
	entries: tuple[MenuEntry, ...]
	multi: bool = False
	all_token: str | None = None
	skip_token: str | None = None
	prompt: str = ''
	default: str | None = None
	all_label: str = 'All of the above'
	skip_label: str = 'Skip'

	def __post_init__(self) -> None:
		object.__setattr__(self, 'entries', tuple(self.entries))

		tokens = [entry.token for entry in self.entries]
		sentinels = [t for t in (self.all_token, self.skip_token) if t is not None]

		if len(set(tokens + sentinels)) != len(tokens) + len(sentinels):
			raise ValueError(f'Menu "{self.title}" defines the same token more than once')

		if self.default is not None and self.default not in tokens + sentinels:
			raise ValueError(f'Menu "{self.title}" has an unknown default token: {self.default}')

	@property
	def tokens(self) -> list[str]:
		return [entry.token for entry in self.entries]

	def get(self, token: str) -> MenuEntry | None:
		for entry in self.entries:
			if entry.token == token:
				return entry
		return None

	def is_known(self, token: str) -> bool:
		return token in (self.all_token, self.skip_token) or self.get(token) is not None

	def all_packages(self) -> list[str]:
		packages: list[str] = []
		for entry in self.entries:
			for package in entry.package_set:
				if package not in packages:
					packages.append(package)
		return packages

	def options(self) -> list[tuple[str, str]]:
		"""
		Returns the (token, label) pairs in the order they should be printed,
		including the sentinels.
		"""
		options = [(entry.token, entry.label) for entry in self.entries]

		if self.all_token is not None:
			options.append((self.all_token, self.all_label))
		if self.skip_token is not None:
			options.append((self.skip_token, self.skip_label))

		return options
