"""
VSaaS Calculator Package

Interactive licensing cost calculator for video surveillance deployments.
Prices camera counts per resolution and recording mode, scaled by the bitrate
selected for each resolution tier.
"""

__version__ = "1.0.0"
