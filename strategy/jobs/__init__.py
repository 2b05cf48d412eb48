"""
Strategy jobs package.

Available entry points:
    python -m strategy.jobs.run_call    # One RPC call across configured endpoints

NOTE: This __init__.py intentionally does NOT import run_call
to avoid side effects when importing the package.
"""

__all__: list[str] = []
