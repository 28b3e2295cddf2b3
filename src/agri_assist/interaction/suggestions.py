"""
Starter questions offered at the beginning of a conversation.
"""

SUGGESTED_QUESTIONS = [
    "How do I test my soil?",
    "What government schemes can help me buy seeds?",
    "Are there subsidies for drip irrigation?",
    "How can I identify the pest on my crop?",
    "What can you do?",
]
