"""Quality checks on romanized input."""
