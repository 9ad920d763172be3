"""Configuration, naming and path resolution shared by all generators."""
