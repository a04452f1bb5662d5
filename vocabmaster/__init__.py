"""VocabMaster backend: vocabulary word sets, words and flashcard review."""
