"""Domain layer: filter algebra, independent of any runtime lookup."""
