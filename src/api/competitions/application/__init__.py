"""Application layer for the Competitions bounded context.

Services orchestrate the directory store through the access decision
engine and form the error boundary for callers.
"""
