"""
Sway Navigation

Directional focus changes for sway that skip over the siblings of tabbed and
stacked containers and land on the physically adjacent container instead.
"""

__version__ = "1.0.0"
__author__ = "NixOS Configuration Team"
