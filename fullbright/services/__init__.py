"""Account and admin business logic."""
