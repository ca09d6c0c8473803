"""Structure repositories."""
