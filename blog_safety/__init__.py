"""Text screening service for blog comments and reader names."""
