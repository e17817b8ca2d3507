"""HTTP surface over the timeline engine."""
