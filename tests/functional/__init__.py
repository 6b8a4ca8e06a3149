"""Functional tests.

User stories told through the CLI: getting help, and setting up a database.
Assertions stick to what a user sees (output, exit codes).
"""
