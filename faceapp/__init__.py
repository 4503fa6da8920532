"""
FaceApp client: phone-verified entry passes for nightlife venues.
Session handling, approval lifecycle and the venue-admin review flow.
"""

__version__ = "0.1.0"
