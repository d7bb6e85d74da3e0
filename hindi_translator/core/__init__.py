"""
Core modules for Hindi Translator.

This package contains the lexicon, transliteration, provider chain,
quota tracking, history and the resolution engine.
"""
