"""
simplelist - onboarding splash and expandable people list for the terminal
"""

__version__ = "0.1.0"
