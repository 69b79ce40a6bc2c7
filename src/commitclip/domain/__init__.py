"""Domain layer: value objects, ports and the resolution pipeline."""
