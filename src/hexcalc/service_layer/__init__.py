"""Service layer for HEXCALC.

Implements the application use-cases: the calculator input port, the service
that orchestrates the domain model and the output ports, the commands and
responses that cross the boundary, and the message bus that routes commands to
their handlers.

Dependency rule: may import `hexcalc.domain` and `hexcalc.interfaces`, but not
`hexcalc.adapters` or `hexcalc.entrypoints`.
"""
