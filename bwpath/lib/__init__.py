"""Graph container and path algorithms for bwpath."""
