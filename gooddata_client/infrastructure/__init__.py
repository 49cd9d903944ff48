"""Infrastructure layer - HTTP transport, link cache and configuration."""
