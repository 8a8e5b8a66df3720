"""Infrastructure: configuration, logging, and database plumbing."""
