"""AquaView bridge-token SSO test harness."""

__version__ = "0.1.0"
