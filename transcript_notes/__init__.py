"""Save YouTube transcripts as notes inside a notes vault."""
