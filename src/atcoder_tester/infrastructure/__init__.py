"""Infrastructure layer: parsers, HTTP, filesystem and processes."""
