"""
Edit-mode state machine module.

Coordinates list selection, the decoupled edit buffer and validation-gated
commit/cancel across the Browse → Add/Edit → Browse cycle.
"""
