"""PyQt6 desktop shell."""
