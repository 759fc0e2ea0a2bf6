"""Load, compile, run and verify small programming exercises."""

__version__ = "5.2.0"