"""Documentation engine: segmentation, scoring and tool handlers."""
