"""HTTP surface for pathjson."""
