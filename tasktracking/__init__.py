"""Task tracking workflow service."""
