"""
slidesummarizer

Turns long-form text into a summary and spreads it across a fixed-ratio
sequence of card-style slides.
"""

__version__ = "1.0.0"
