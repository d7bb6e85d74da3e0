"""
Offline English to Hindi lexicon.

Exact-key lookup only: no partial, fuzzy or per-word matching.
"""

import dataclasses
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from ..storage.models import OFFLINE_SOURCE, TranslationRecord


def normalize(word: str) -> str:
    """Normalize a query into a lexicon key (trim and lowercase)."""
    return word.strip().lower()


@dataclass(frozen=True)
class LexiconStore:
    """Read-only mapping of normalized English keys to translations."""
    entries: Mapping[str, TranslationRecord]

    def __post_init__(self):
        """Freeze the table so callers can't add or replace entries."""
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def lookup(self, word: str) -> Optional[TranslationRecord]:
        """Look up a word or phrase.

        Args:
            word: Raw user input

        Returns:
            A copy of the stored record, or None when the key is unknown
        """
        record = self.entries.get(normalize(word))
        if record is None:
            return None
        return dataclasses.replace(record)

    def __contains__(self, word: str) -> bool:
        return normalize(word) in self.entries

    def __len__(self) -> int:
        return len(self.entries)


def _entries(*rows: Tuple[str, str, str]) -> Dict[str, TranslationRecord]:
    return {
        english: TranslationRecord(
            headword=english, hindi=hindi, romanized=romanized, source=OFFLINE_SOURCE
        )
        for english, hindi, romanized in rows
    }


# Built-in word list - curated romanizations, preferred over computed ones
LEXICON = LexiconStore(_entries(
    # Greetings
    ('hello', 'नमस्ते', 'namaste'),
    ('hi', 'हाय', 'haay'),
    ('goodbye', 'अलविदा', 'alvida'),
    ('bye', 'बाय', 'bye'),
    ('thank you', 'धन्यवाद', 'dhanyavaad'),
    ('please', 'कृपया', 'kripya'),
    ('sorry', 'माफ़ कीजिए', 'maaf kijiye'),
    ('welcome', 'स्वागत', 'swaagat'),
    ('yes', 'हाँ', 'haan'),
    ('no', 'नहीं', 'nahin'),

    # Helping verbs
    ('be', 'होना', 'hona'),
    ('is', 'है', 'hai'),
    ('am', 'हूँ', 'hun'),
    ('are', 'हो/हैं', 'ho/hain'),
    ('was', 'था/थी', 'tha/thi'),
    ('were', 'थे/थीं', 'the/thin'),
    ('will', 'होगा', 'hoga'),
    ('can', 'सकना', 'sakna'),
    ('do', 'करना', 'karna'),
    ('have', 'रखना', 'rakhna'),

    # Pronouns
    ('i', 'मैं', 'main'),
    ('you', 'तुम/आप', 'tum/aap'),
    ('he', 'वह', 'vah'),
    ('she', 'वह', 'vah'),
    ('it', 'यह', 'yah'),
    ('we', 'हम', 'hum'),
    ('they', 'वे', 've'),
    ('this', 'यह', 'yah'),
    ('that', 'वह', 'vah'),
    ('my', 'मेरा', 'mera'),
    ('your', 'तुम्हारा', 'tumhaara'),

    # Question words
    ('what', 'क्या', 'kya'),
    ('who', 'कौन', 'kaun'),
    ('where', 'कहाँ', 'kahan'),
    ('when', 'कब', 'kab'),
    ('why', 'क्यों', 'kyon'),
    ('how', 'कैसे', 'kaise'),
    ('which', 'कौन सा', 'kaun sa'),

    # Common nouns
    ('person', 'व्यक्ति', 'vyakti'),
    ('man', 'आदमी', 'aadmi'),
    ('woman', 'औरत', 'aurat'),
    ('child', 'बच्चा', 'baccha'),
    ('book', 'किताब', 'kitaab'),
    ('car', 'कार', 'kaar'),
    ('tree', 'पेड़', 'ped'),
    ('sun', 'सूर्य', 'surya'),
    ('moon', 'चाँद', 'chaand'),
    ('time', 'समय', 'samay'),
    ('work', 'काम', 'kaam'),
    ('life', 'जीवन', 'jeevan'),
    ('money', 'पैसा', 'paisa'),
    ('day', 'दिन', 'din'),
    ('night', 'रात', 'raat'),
    ('city', 'शहर', 'shahar'),
    ('country', 'देश', 'desh'),
    ('language', 'भाषा', 'bhaasha'),

    # Daily words
    ('water', 'पानी', 'paani'),
    ('food', 'खाना', 'khaana'),
    ('family', 'परिवार', 'parivaar'),
    ('friend', 'दोस्त', 'dost'),
    ('house', 'घर', 'ghar'),
    ('school', 'स्कूल', 'school'),
    ('beautiful', 'सुंदर', 'sundar'),
    ('love', 'प्रेम', 'prem'),
    ('mother', 'माता', 'mata'),
    ('father', 'पिता', 'pita'),
    ('brother', 'भाई', 'bhai'),
    ('sister', 'बहन', 'bahan'),
    ('good', 'अच्छा', 'accha'),
    ('bad', 'बुरा', 'bura'),
    ('big', 'बड़ा', 'bada'),
    ('small', 'छोटा', 'chhota'),
    ('happy', 'खुश', 'khush'),
))
