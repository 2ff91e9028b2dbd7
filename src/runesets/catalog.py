"""Named character sets and their resolution into flat code point strings.

Primitive entries are literal strings. Composite entries are declared as an
ordered list of constituent names and flattened once, when this module is
imported. A set never contains all symbols of the script it is named after;
each is a representative sample.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from runesets.errors import InvalidArgumentError, UnknownCharsetError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CharsetEntry:
    name: str
    description: str
    chars: str
    constituents: tuple[str, ...] = ()

    @property
    def size(self) -> int:
        return len(self.chars)

    @property
    def is_composite(self) -> bool:
        return bool(self.constituents)


_PRIMITIVES: tuple[tuple[str, str, str], ...] = (
    (
        "ascii",
        "Printable ASCII minus quotes, slashes and most brackets.",
        " !#$%&()*+,-.0123456789:;=?@ABCDEFGHIJKLMNOPQRSTUVWXYZ^_abcdefghijklmnopqrstuvwxyz|~",
    ),
    (
        "polish",
        "Polish letters, both cases.",
        "ĄąĆćĘęŁłŃńÓóŚśŹźŻżabcdefghijklmnoprstuwvxyzABCDEFGHIJKLMNOPRSTUWVXYZ",
    ),
    (
        "english",
        "English letters, both cases.",
        "abcdefghijklmnoprstuwvxyzABCDEFGHIJKLMNOPRSTUWVXYZ",
    ),
    (
        "russian",
        "Russian letters, both cases.",
        "АаБбВвГгДдЕеЁёЖжЗзИиЙйКкЛлМмНнОоПпРрСсТтУуФфХхЦцЧчШшЩщЪъЫыЬьЭэЮюЯя",
    ),
    (
        "mathematical_symbols",
        "Mathematical operators and brackets.",
        "∛ℤℝ⋃⋂⋡⪺≠⊐∵∧⦝⊕∯∑∏⊶⫝̸⦕⟪⦅」⟅⦋",
    ),
    (
        "mathematical_fonts",
        "Letters and digits from the mathematical alphanumeric fonts.",
        "𝔄𝔞𝕭𝖇𝔻𝕕𝟛𝐅𝐟𝐿𝑙𝑴𝒎𝒩𝓃𝓞𝓸𝖶𝗐𝗫𝘅𝟭𝘠𝘺𝚉𝚣",
    ),
    (
        "emoji",
        "Emoji, including one regional indicator pair.",
        "🤡🤖🧟🏋🥇☟🚲🚠🐞🐜💄🐲🌓🌪🇵🇱💵",
    ),
    (
        "currencies",
        "Currency signs.",
        "₿£$¢₰₱₣₳฿₲₭₥₦₱₽₴₮₩",
    ),
    (
        "sex",
        "Gender symbols.",
        "⚥⚩⚮⚭⚣⚢⚤⚯",
    ),
    (
        "keyboard",
        "Keyboard and technical symbols.",
        "⌘⎈✄↵✧✲⎇✦✧",
    ),
    (
        "greek",
        "Greek letters, plain and mathematical.",
        "αβδεθλμπφψΩ𝞕𝞖𝞗𝞘𝝽𝝾𝝿𝞀𝞂",
    ),
    (
        "inverted_letters",
        "Latin letters turned upside down.",
        "Z⅄XʍɅ∩ꞱSᴚÒԀONƜꞀꞰſIH⅁ℲƎDƆBⱯzʎxʍʌnʇsɹbdouɯꞁʞfᴉɥᵷɟǝpɔqɐ",
    ),
    (
        "ipa",
        "International Phonetic Alphabet symbols.",
        "āäēĕæɛiːɝo͞o",
    ),
    (
        "full_width_characters",
        "Full-width forms, as wide as a CJK ideograph in any font.",
        "０ＣＤ￦￤ｒｐａｒｔｉｃｕｌａｒ",
    ),
    (
        "units",
        "CJK compatibility unit symbols.",
        "㎛㎠㎢㎖㎲㎏㎆㎑㎷㏀㎃㎨㎮㎪㎉㏑㍱㏖",
    ),
    (
        "braille",
        "Braille patterns.",
        "⠞⠽⠏⠑⠓⠑⠗⠑",
    ),
    (
        "latin",
        "Latin letters outside the English alphabet.",
        "ᴁèóƃᶐɷȷᴂɒᴝᴥ",
    ),
    (
        "cyrillic_extension",
        "Cyrillic letters used by languages other than Russian.",
        "ԆҤ҂ԔԙӜԨԬӦӴѠѼ",
    ),
    (
        "chinese",
        "Common Chinese characters.",
        "的一是在不了有和人这中大为上个国相见欢·林花谢了春红",
    ),
    (
        "japanese",
        "Hiragana, katakana and half-width katakana.",
        "あいうえアイウエオ・ヽヾヿｱｲｳｴｵｶｷｸ",
    ),
    (
        "korean",
        "Hangul jamo.",
        "ᅒᅓᅔᅕᅖᅗᅘᆪᆫᆬᆭᆮᆯᆰ",
    ),
    (
        "arabic",
        "Arabic letters, digits and ligatures.",
        "ﷺ﷽ﵴﴙﲀ۝ﲂ۞؊٩١۲ݶمڮجݗݨݳھڝ",
    ),
    (
        "ethiopian",
        "Ethiopic syllables and punctuation.",
        "ቷቸቹጟጠኸኹⶹꬨꬩꬖꬠ᎐᎑᎒፣፤፥፪፫፬የኢትዮጵያ፡መ",
    ),
    (
        "devanagari",
        "Devanagari letters and digits, the script of Hindi.",
        "ऒओॺॻ॥॰षस१२३ळऴ",
    ),
    (
        "bengali",
        "Bengali letters, digits and signs.",
        "ঊঋজঝঞলশ৪৫৵৶ঁংৗৢ",
    ),
    (
        "tamil",
        "Tamil letters, digits and signs.",
        "ஃஅஆஇணதந௫௬௭ௐ௳௴ோ ௌ",
    ),
    (
        "tibetan",
        "Tibetan letters, marks and digits.",
        "གྷངཅ༳༪༫༐༑༒࿄࿅࿇࿈༚༛༜࿐࿑࿒ ཱ ི ཱི༻༼ ༽ྨ ྩ",
    ),
    (
        "phoenician",
        "Phoenician letters.",
        "𐤟𐤛𐤗𐤘𐤒𐤓𐤔𐤕",
    ),
    (
        "runes",
        "Runic letters used for Germanic languages.",
        "ᚠᚡᚢᛋᛌᛍ",
    ),
)

# Constituents must be declared earlier in this table or in _PRIMITIVES.
_COMPOSITES: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    (
        "cyrillic",
        "Russian plus letters from other Cyrillic alphabets.",
        ("russian", "cyrillic_extension"),
    ),
    (
        "unicode",
        "Every non-ASCII set in the catalog; mostly multi-byte code points.",
        (
            "emoji",
            "sex",
            "keyboard",
            "currencies",
            "greek",
            "mathematical_symbols",
            "mathematical_fonts",
            "inverted_letters",
            "braille",
            "ipa",
            "full_width_characters",
            "units",
            "latin",
            "cyrillic",
            "chinese",
            "japanese",
            "korean",
            "arabic",
            "ethiopian",
            "devanagari",
            "bengali",
            "tamil",
            "tibetan",
            "phoenician",
            "runes",
        ),
    ),
)


def _build_catalog() -> dict[str, CharsetEntry]:
    catalog: dict[str, CharsetEntry] = {}
    for name, description, chars in _PRIMITIVES:
        if not chars:
            raise ValueError(f"charset '{name}' must not be empty")
        if name in catalog:
            raise ValueError(f"charset '{name}' is declared twice")
        catalog[name] = CharsetEntry(
            name=name, description=description, chars=chars
        )

    for name, description, constituents in _COMPOSITES:
        if name in catalog:
            raise ValueError(f"charset '{name}' is declared twice")
        missing = [part for part in constituents if part not in catalog]
        if missing:
            raise ValueError(
                f"composite charset '{name}' references undeclared "
                f"charsets: {', '.join(missing)}"
            )
        chars = "".join(catalog[part].chars for part in constituents)
        if not chars:
            raise ValueError(f"charset '{name}' must not be empty")
        catalog[name] = CharsetEntry(
            name=name,
            description=description,
            chars=chars,
            constituents=tuple(constituents),
        )

    logger.debug(
        "built charset catalog: %d primitive, %d composite",
        len(_PRIMITIVES),
        len(_COMPOSITES),
    )
    return catalog


_CATALOG = _build_catalog()


def _normalize_name(name: str) -> str:
    return name.strip().lower().replace("-", "_")


def charset_names() -> list[str]:
    return list(_CATALOG)


def iter_entries() -> Iterator[CharsetEntry]:
    return iter(_CATALOG.values())


def has_charset(name: str) -> bool:
    return _normalize_name(name) in _CATALOG


def get_entry(name: str) -> CharsetEntry:
    """Look up a catalog entry by name.

    Names are case-insensitive and '-' is accepted in place of '_'.
    Raises UnknownCharsetError for names outside the catalog.
    """
    entry = _CATALOG.get(_normalize_name(name))
    if entry is None:
        raise UnknownCharsetError(name, charset_names())
    return entry


def get_charset(name: str) -> str:
    return get_entry(name).chars


def resolve_charset(value: str) -> str:
    """Return the catalog set named by value, or value itself as a literal."""
    if has_charset(value):
        return get_charset(value)
    if not value:
        raise InvalidArgumentError("empty charset")
    return value


ASCII = get_charset("ascii")
POLISH = get_charset("polish")
ENGLISH = get_charset("english")
RUSSIAN = get_charset("russian")
MATHEMATICAL_SYMBOLS = get_charset("mathematical_symbols")
MATHEMATICAL_FONTS = get_charset("mathematical_fonts")
EMOJI = get_charset("emoji")
CURRENCIES = get_charset("currencies")
SEX = get_charset("sex")
KEYBOARD = get_charset("keyboard")
GREEK = get_charset("greek")
INVERTED_LETTERS = get_charset("inverted_letters")
IPA = get_charset("ipa")
FULL_WIDTH_CHARACTERS = get_charset("full_width_characters")
UNITS = get_charset("units")
BRAILLE = get_charset("braille")
LATIN = get_charset("latin")
CYRILLIC_EXTENSION = get_charset("cyrillic_extension")
CYRILLIC = get_charset("cyrillic")
CHINESE = get_charset("chinese")
JAPANESE = get_charset("japanese")
KOREAN = get_charset("korean")
ARABIC = get_charset("arabic")
ETHIOPIAN = get_charset("ethiopian")
DEVANAGARI = get_charset("devanagari")
BENGALI = get_charset("bengali")
TAMIL = get_charset("tamil")
TIBETAN = get_charset("tibetan")
PHOENICIAN = get_charset("phoenician")
RUNES = get_charset("runes")
UNICODE = get_charset("unicode")
