"""TID texture container: header layout, types and errors."""
