"""
warplan: allocate ranked game accounts into war groups by tactic.
"""
