"""
IP Visualizer - Terminal IP geolocation with an ASCII world map

Looks up your public IP with ip-api.com and marks where it lands
on a dotted world map.
"""

__version__ = "1.0.0"

from .app import run

__all__ = ["run"]
