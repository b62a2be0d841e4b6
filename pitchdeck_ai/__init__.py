"""
PitchDeck-AI: LLM-generated startup pitch decks and business validations.
"""

__version__ = "1.0.0"
