"""
IPFS Image Moderation Adapter.

This module provides a Chainlink external adapter that fetches an image from an
IPFS gateway, classifies it with AWS Rekognition and reports the moderation
confidences in a fixed five-category format.
"""
