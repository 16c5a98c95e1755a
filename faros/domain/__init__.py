"""Domain layer for Faros.

Pure models and operations for the task tree. Nothing in this package
performs I/O, prompts the user, or exits the process.
"""
