"""Application layer – pagination primitives and the list-fetch controller."""
