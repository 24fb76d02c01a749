"""HTTP API of the DMP server."""
