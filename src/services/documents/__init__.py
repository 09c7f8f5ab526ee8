"""Document storage and text extraction."""
