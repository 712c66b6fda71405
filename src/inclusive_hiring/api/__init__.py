"""HTTP API for bias checks, candidate feedback and posting schemas."""
