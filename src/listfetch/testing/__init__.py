"""Testing – in-memory doubles for the fetch port."""
