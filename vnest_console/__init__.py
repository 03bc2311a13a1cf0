"""
Combination Console - management UI for the sentence-template word lists.

Words are tagged VERB, SUBJECT or OBJECT; combinations pair a verb with a
subject and an optional object. The console is a FastAPI app that renders
both lists and forwards every change to the remote /api service.
"""

__version__ = '1.0.0'
