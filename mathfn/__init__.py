"""Registry of named mathematical functions and a string-keyed dispatcher."""
