"""Internal helpers shared by the public types. Not part of the API."""
