"""Domain layer — check models, pure evaluation rules and ports."""
