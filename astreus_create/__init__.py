"""create-astreus-agent: scaffold new Astreus AI agent projects."""

__version__ = "0.5.38"
