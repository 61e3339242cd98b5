"""
# glsexpand: __init__.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Expand glossary abbreviation macros into plain text.
"""
