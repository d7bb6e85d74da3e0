"""
Configuration for Hindi Translator.
"""

from .loader import TranslatorConfig, load_translator_config

__all__ = ["TranslatorConfig", "load_translator_config"]
