"""Project package: settings, root URLconf, response envelope and error handling."""
