"""
Storage module holding the chained hash tables used for articles and terms.
"""
