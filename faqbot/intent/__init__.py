"""Intent matching.

The intent layer maps a free-text chat message onto one entry of a fixed, hand-authored intent
table and picks a canned HTML reply for it. There is no language model involved.
"""
