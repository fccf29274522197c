"""palette_engine.engine — Extraction pipeline.

quantize -> select -> (classify + synthesize) for one image, or
quantize -> select per image -> aggregate -> (classify + synthesize) for many.
ColourExtractor in engine.extractor ties the stages together.
"""
