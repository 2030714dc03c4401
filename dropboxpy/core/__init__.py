"""Core building blocks of dropboxpy."""
