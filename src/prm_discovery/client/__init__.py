"""Client-side discovery of protected resource metadata."""
