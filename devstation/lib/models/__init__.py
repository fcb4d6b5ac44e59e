from .package_set import MenuEntry, PackageSet, PackageSetMenu, PackageSource

__all__ = [
	'MenuEntry',
	'PackageSet',
	'PackageSetMenu',
	'PackageSource',
]
