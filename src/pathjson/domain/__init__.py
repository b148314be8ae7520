"""Domain types and models shared across the decode pipeline and the server."""
