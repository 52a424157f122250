"""
Plating Calculator - Cell Plating Recipe Utility

Computes how much harvested cell suspension and media to add to a culture
flask to reach a target seeding density.
"""

__version__ = "0.1.0"
__author__ = "Genome Innovation Hub"
