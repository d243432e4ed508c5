"""Site settings commands."""
