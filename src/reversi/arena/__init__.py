"""
Arena module for running tournaments between AI tiers.
"""
from .arena import Arena, ELORatingSystem

__all__ = ['Arena', 'ELORatingSystem']
