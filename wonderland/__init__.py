"""
Christmas Wonderland API

Seasonal full-stack demo backend
- Wish wall (anonymous allowed)
- Personal todo lists
- Timeline, gallery and playlist
- Daily visit statistics
- JWT-based accounts
"""

__version__ = "1.0.0"
__author__ = "Christmas Wonderland Team"
