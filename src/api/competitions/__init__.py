"""Competitions bounded context.

Owns the competition directory: schools (tenants), principals, competitions,
the participation ledger, and the tenant-aware access decisions that gate
every read and write against them.
"""
