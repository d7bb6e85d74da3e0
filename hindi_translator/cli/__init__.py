"""
Command-line interface for Hindi Translator.
"""
