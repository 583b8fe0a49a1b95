"""
Sahayak - Multilingual Welfare Scheme Assistant
===============================================
A multilingual chat backend that helps citizens discover Indian
government welfare schemes.

Features:
- Chat in 13 languages (English + Indian languages)
- Heuristic script/keyword language detection
- Scheme search by keyword, category and state
- Best-effort extraction of user details (age, income, state...)

Tech Stack:
- FastAPI (async backend)
- SQLAlchemy + aiosqlite (scheme store)
- Groq API (LLM)
"""

__version__ = "1.0.0"
__author__ = "Sahayak Team"
