"""Domain layer for the Competitions bounded context.

Contains aggregates, value objects, and the access decision engine.
Nothing in this package performs I/O or depends on outer layers.
"""
