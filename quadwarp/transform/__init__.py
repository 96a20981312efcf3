"""Homography solving, verification, encoding and projection."""
