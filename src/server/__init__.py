"""HTTP server for mongodocs."""
