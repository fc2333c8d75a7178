"""mpd_palette.core — Foundation layer.

Contains the colour-space adapter, the filter / distance / sampling / scoring /
ranking pipeline, configuration loading, and report builders.
This module has NO dependencies on mpd_palette.commands or mpd_palette.registry.
Only stdlib, numpy, PIL and skimage are allowed here.
"""
