from .resolver import ResolvedHeader, get_header, parse_directive

__all__ = ["ResolvedHeader", "get_header", "parse_directive"]
