"""palette_engine.core — Foundation layer.

Colour maths, value types, errors, configuration, image decoding and report
formatting. This module has NO dependencies on palette_engine.engine,
palette_engine.commands or palette_engine.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
