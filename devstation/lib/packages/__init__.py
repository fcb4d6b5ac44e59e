from .selector import Selection, parse_tokens, resolve_selection, validate_tokens

__all__ = [
	'Selection',
	'parse_tokens',
	'resolve_selection',
	'validate_tokens',
]
