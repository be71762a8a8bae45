"""Client for the Nitrado game server hosting API: services, game servers, stats, players, files and settings."""

__version__ = "0.1.0"