"""Core interfaces.

Structural contracts (Protocol) implemented by adapters and by test fakes, so
the Status Client depends on abstractions rather than on `subprocess` or a TTY.
"""
