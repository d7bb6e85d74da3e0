"""
Hindi Translator.

Resolves English words and short phrases to Hindi, preferring an offline
lexicon and falling back to remote translation services.
"""

__version__ = "0.1.0"
