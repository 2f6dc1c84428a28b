"""Site favicon discovery, normalization and fallback generation."""
