"""Graph export helpers.

``convert`` turns a wired ``GiftGraph`` into a NetworkX graph for solvers.
"""
