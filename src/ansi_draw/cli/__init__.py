"""Command line front end and terminal I/O helpers."""
