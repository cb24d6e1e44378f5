"""Desktop front end for the checkers engine."""
