"""NiceGUI interface - thin visualization layer for the chat session.

Responsibilities:
    - Header, transcript and input form styled from the bot config
    - Typing indicator while a reply is pending
    - Auto-scroll to the latest message on every state change
    - Transcript flush when the browser disconnects

Contains no conversation logic. Delegates all state changes to the
session controller.
"""
