"""
Gemini chat package.

Provides:
- A single-turn client for the Gemini generateContent REST API
- An interactive terminal chat loop on top of it
"""

__version__ = "0.1.0"
