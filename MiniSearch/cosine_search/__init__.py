"""
Cosine search module ranking articles by the cosine similarity of raw term
frequencies and selecting the best matches with a max-heap.
"""
