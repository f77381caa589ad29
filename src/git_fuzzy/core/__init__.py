"""Branch resolution and checkout logic."""
