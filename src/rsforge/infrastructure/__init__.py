"""Infrastructure layer: the cargo subprocess runner and filesystem writes."""
