"""
Core engine: canonical values, exact arithmetic, ordering and codecs.

Everything here is pure and immutable; nothing depends on external
systems or holds mutable state.
"""
