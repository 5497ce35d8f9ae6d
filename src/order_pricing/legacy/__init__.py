"""Legacy subpackage - code smell versions kept for comparison with their refactorings."""
