"""User interfaces built on top of the Last.fm client."""
