"""Cross-cutting pieces: settings, logging, database access, security and errors."""
