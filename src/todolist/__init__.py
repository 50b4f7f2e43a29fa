"""todolist - a single ordered task list behind swappable persistence and clock ports."""

__version__ = "0.1.0"

CONTRACT_NAME = "todolist"
