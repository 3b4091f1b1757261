"""Core building blocks: configuration, types, loading, packing and ranking."""
