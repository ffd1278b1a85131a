"""Pit stop record table, filter engine and linked selection state."""
