"""
AI PM Backend - LLM relay with ethical AI checklist generation
"""
__version__ = "1.0.0"
