"""Game-logic core for a rhythm-driven underwater fishing game: timers, logging, save data, boss patterns, dialog, fish spawning and render math."""

__version__ = "0.1.0"