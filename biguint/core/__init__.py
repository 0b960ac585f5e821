"""
Core arithmetic engine: digit-vector math, decimal codec, contracts and
the UInt value type.

This package is pure computation: no I/O beyond the optional stream
adapters of the codec, no shared mutable state.
"""
