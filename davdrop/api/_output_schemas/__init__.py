"""Output schemas for davdrop API commands."""
