"""
Devanagari to Latin transliteration.

A fixed approximation table, not a phonetic standard. Matching is greedy:
a known two-character compound always wins over its two single-character
mappings.
"""

from typing import Dict

PLACEHOLDER = "pronunciation guide"

VIRAMA = "्"
NUKTA = "़"

VOWELS: Dict[str, str] = {
    'अ': 'a', 'आ': 'aa', 'इ': 'i', 'ई': 'ii', 'उ': 'u', 'ऊ': 'uu',
    'ऋ': 'ri', 'ए': 'e', 'ऐ': 'ai', 'ओ': 'o', 'औ': 'au',
}

CONSONANTS: Dict[str, str] = {
    'क': 'ka', 'ख': 'kha', 'ग': 'ga', 'घ': 'gha', 'ङ': 'nga',
    'च': 'cha', 'छ': 'chha', 'ज': 'ja', 'झ': 'jha', 'ञ': 'nya',
    'ट': 'ta', 'ठ': 'tha', 'ड': 'da', 'ढ': 'dha', 'ण': 'na',
    'त': 'ta', 'थ': 'tha', 'द': 'da', 'ध': 'dha', 'न': 'na',
    'प': 'pa', 'फ': 'pha', 'ब': 'ba', 'भ': 'bha', 'म': 'ma',
    'य': 'ya', 'र': 'ra', 'ल': 'la', 'व': 'va',
    'श': 'sha', 'ष': 'sha', 'स': 'sa', 'ह': 'ha',
}

VOWEL_SIGNS: Dict[str, str] = {
    'ा': 'aa', 'ि': 'i', 'ी': 'ii', 'ु': 'u', 'ू': 'uu', 'ृ': 'ri',
    'े': 'e', 'ै': 'ai', 'ो': 'o', 'ौ': 'au',
}

MARKS: Dict[str, str] = {
    VIRAMA: '',
    NUKTA: '',
    'ं': 'n', 'ँ': 'n', 'ः': 'h', '।': '.',
}

DIGITS: Dict[str, str] = {
    chr(0x0966 + i): str(i) for i in range(10)
}

# Consonants whose nukta form changes the sound
NUKTA_FORMS: Dict[str, str] = {
    'ड': 'ra', 'ढ': 'rha', 'क': 'qa', 'ख': 'kha', 'ग': 'ga',
    'ज': 'za', 'फ': 'fa',
}


# Precomposed code points for the same letters (U+0958..U+095F)
PRECOMPOSED: Dict[str, str] = {
    chr(0x0958 + i): roman
    for i, roman in enumerate(("qa", "kha", "ga", "za", "ra", "rha", "fa", "ya"))
}


def _build_tables():
    singles: Dict[str, str] = {}
    for table in (VOWELS, CONSONANTS, VOWEL_SIGNS, MARKS, DIGITS, PRECOMPOSED):
        singles.update(table)

    compounds: Dict[str, str] = {}
    for consonant, roman in CONSONANTS.items():
        stem = roman[:-1]  # drop the inherent 'a'
        compounds[consonant + VIRAMA] = stem
        for sign, vowel in VOWEL_SIGNS.items():
            compounds[consonant + sign] = stem + vowel
    for consonant, roman in NUKTA_FORMS.items():
        compounds[consonant + NUKTA] = roman
    return singles, compounds


SINGLE_MAP, COMPOUND_MAP = _build_tables()


def to_roman(text: str) -> str:
    """Transliterate Devanagari text to a Latin approximation.

    Characters outside the table pass through unchanged. Never raises and
    never returns an empty string.

    Args:
        text: Devanagari (or mixed) text

    Returns:
        Romanized text, or the placeholder when nothing was produced
    """
    if not isinstance(text, str):
        return PLACEHOLDER

    out = []
    i = 0
    while i < len(text):
        pair = text[i:i + 2]
        if len(pair) == 2 and pair in COMPOUND_MAP:
            out.append(COMPOUND_MAP[pair])
            i += 2
            continue
        char = text[i]
        out.append(SINGLE_MAP.get(char, char))
        i += 1

    romanized = ''.join(out)
    return romanized or PLACEHOLDER
