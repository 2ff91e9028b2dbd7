"""runesets: random strings drawn from named character sets."""

from runesets.catalog import (
    ASCII,
    CYRILLIC,
    UNICODE,
    CharsetEntry,
    charset_names,
    get_charset,
    get_entry,
    iter_entries,
    resolve_charset,
)
from runesets.errors import InvalidArgumentError, UnknownCharsetError
from runesets.sampler import (
    Sampler,
    default_sampler,
    random_runes,
    random_string,
)

__all__ = [
    "ASCII",
    "CYRILLIC",
    "UNICODE",
    "CharsetEntry",
    "InvalidArgumentError",
    "Sampler",
    "UnknownCharsetError",
    "charset_names",
    "default_sampler",
    "get_charset",
    "get_entry",
    "iter_entries",
    "random_runes",
    "random_string",
    "resolve_charset",
]
