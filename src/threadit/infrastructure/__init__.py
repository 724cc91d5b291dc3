"""Infrastructure adapters: relational persistence and email delivery."""
