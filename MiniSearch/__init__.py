"""
MiniSearch - a small full-text retrieval engine.
Ranks title-keyed articles against free-text queries by cosine similarity
of stop-word filtered term frequencies.
"""

__version__ = "0.1.0"
