"""
Garment matching and ranking: normalize, filter, score, paginate, assemble.
"""
