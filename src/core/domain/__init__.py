"""Domain models and errors.

Plain, immutable data (Pydantic v2). The domain knows nothing about `gh`,
subprocesses or the terminal.
"""
