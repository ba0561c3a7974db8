"""
The generators proper. Each one parses a declaration of a specific shape and produces the Python definitions derived
from it, either as a `GeneratedDefinitions` collection (for splicing into a hand-written class) or as the rendered text
of a complete module.
"""
