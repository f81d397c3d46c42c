"""Solution discussions: threaded comments and voting on analyzed code solutions."""
