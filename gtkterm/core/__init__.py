"""Core, GUI-independent parts of GTKTerm."""
