"""
Services Module

External integrations, each with a Mock (development) and a Real
(production) implementation.

Services:
    - notifications: contact acknowledgment email via SendGrid
"""
