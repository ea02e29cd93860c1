"""PinLocator — find ICT test points and nets on an interactive board map."""

__version__ = "0.1.0"
