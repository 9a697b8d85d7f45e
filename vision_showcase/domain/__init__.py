"""Domain layer: pure models, repository contracts and field constants."""
