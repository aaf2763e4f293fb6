"""Runtime configuration for tweetsent."""
