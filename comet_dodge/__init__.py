"""
Comet Dodge: steer a ship through a falling comet storm.
"""

__version__ = "1.0.0"
