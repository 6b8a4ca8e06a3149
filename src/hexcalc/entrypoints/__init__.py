"""Entry points for HEXCALC.

Input adapters that turn outside requests into service-layer commands. The
only entry point today is the command-line interface in `hexcalc.entrypoints.cli`.

Dependency rule: entry points talk to the application through
`hexcalc.bootstrap` and the service-layer commands/responses.
"""
