"""Source tree classification, asset discovery and the tree walker."""
