"""
Vocabulary bounded context - Domain layer.

This context handles the words users study:
- Word sets (public catalogue and personal collections)
- Words with translation, pronunciation and example sentence

Aggregates:
- WordSet: a titled collection with a cached word count
- Word: one vocabulary entry belonging to a word set
"""
