"""
Utility modules for tweetsent.

Cross-cutting concerns:
- Output: result serialization, stdout sink and batch summary
"""
