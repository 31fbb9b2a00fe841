"""
WiseLife App - Challenge Participation Client

Client core for the WiseLife group-challenge service. Lets an authenticated
user join a challenge, interprets the server's error taxonomy, and renews an
expired access token with the stored refresh token.
"""

__version__ = "0.1.0"
__author__ = "WiseLife Team"
