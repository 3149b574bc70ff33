"""Core application plumbing: errors and logging."""
