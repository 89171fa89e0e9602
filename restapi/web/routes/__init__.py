"""Routes HTTP de RestAPI."""
