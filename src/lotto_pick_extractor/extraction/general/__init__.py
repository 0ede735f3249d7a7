"""
general.
=======

Domain-neutral building blocks of the pick pipeline: digit-string checks,
the partition splitter, and shared utilities.

Exports:
- Token, Partition: value shapes produced by the splitter.
"""

from .types import Partition, Token

__all__ = ["Partition", "Token"]
