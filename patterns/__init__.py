"""Lending library patterns.

Each module is a self-contained piece of the lending core: the book
lifecycle state machine, access rules, the catalog repository, and domain
configuration.
"""
