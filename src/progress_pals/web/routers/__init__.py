"""Route modules for the web interface."""
