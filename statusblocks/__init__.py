"""Data collection and state logic for status bar blocks: memory, uptime, mail, music, network, GPU, sound, weather and more."""

__version__ = "0.1.0"