"""Core services for homeboard: config, content, remote sources and rendering."""
