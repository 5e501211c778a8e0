"""GTK adapters for paginated lists.

Import the modules directly; they require PyGObject.
"""
