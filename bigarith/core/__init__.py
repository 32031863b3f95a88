"""
Core domain models, digit-level algorithms, and interchange contracts.

Everything here is pure computation over immutable values: no I/O beyond
loading the bundled JSON Schema files.
"""
