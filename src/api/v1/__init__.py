"""API v1: users, profile and posts resources."""
