"""
Core value type, digit-array primitives and contracts.

This module contains the arbitrary-precision integer and the schoolbook
algorithms it is built on.
"""
