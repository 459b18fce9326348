"""Ports for the Competitions bounded context.

Protocols the application layer depends on, and the errors they raise.
"""
