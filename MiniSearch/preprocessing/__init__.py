"""
Preprocessing module for text processing in MiniSearch.
Includes the document model, letters-only normalization, lowercasing and stop words.
"""
