"""Lifecycle primitives: node tree, tweens, events, completion slot."""
