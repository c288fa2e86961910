"""Command line interface for the Garage application."""
