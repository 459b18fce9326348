"""Shared Kernel module.

Vocabulary every bounded context agrees on. For now that is the
authorization vocabulary (resource types, permissions and their string
forms) used in access decisions, errors and log fields.
"""
